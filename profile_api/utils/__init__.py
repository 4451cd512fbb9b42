"""
Utility functions for Profile API
"""
from profile_api.utils.security import (
    verify_password, get_password_hash,
    create_access_token, issue_token, verify_token
)
from profile_api.utils.file_handler import (
    generate_unique_filename, save_upload_file,
    read_stored_file, resolve_upload_path, delete_file
)

__all__ = [
    "verify_password", "get_password_hash",
    "create_access_token", "issue_token", "verify_token",
    "generate_unique_filename", "save_upload_file",
    "read_stored_file", "resolve_upload_path", "delete_file"
]
