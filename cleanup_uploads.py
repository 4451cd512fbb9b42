"""
Cleanup script to remove uploaded files no user points at

Profile photo updates keep the previous file, and image uploads leave their
staged copy in the upload directory once the bytes are in the database.
"""
import logging
from typing import Optional, Tuple
from sqlalchemy.orm import Session

from profile_api.config import settings
from profile_api.database import SessionLocal
from profile_api.models import User
from profile_api.utils import delete_file, resolve_upload_path

logger = logging.getLogger(__name__)


def cleanup_orphaned_uploads(db: Optional[Session] = None, dry_run: bool = False) -> Tuple[int, int]:
    """
    Delete files in the upload directory that are not any user's photo

    Args:
        db: Database session, a new one is opened if omitted
        dry_run: Only report what would be deleted

    Returns:
        Tuple[int, int]: Files kept and files deleted
    """
    owns_session = db is None
    if owns_session:
        db = SessionLocal()

    try:
        referenced = {
            resolve_upload_path(photo).name
            for (photo,) in db.query(User.photo).filter(User.photo.isnot(None)).all()
        }

        upload_dir = settings.upload_path
        if not upload_dir.exists():
            logger.info(f"Upload directory {upload_dir} does not exist, nothing to clean")
            return 0, 0

        kept = 0
        deleted = 0
        for path in sorted(upload_dir.iterdir()):
            if not path.is_file():
                continue
            if path.name in referenced:
                kept += 1
                continue

            if dry_run:
                logger.info(f"Would delete {path}")
                deleted += 1
            elif delete_file(path):
                logger.info(f"Deleted {path}")
                deleted += 1
            else:
                logger.warning(f"Failed to delete {path}")

        return kept, deleted

    finally:
        if owns_session:
            db.close()


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--dry-run", action="store_true", help="only list files that would be deleted")
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    kept, deleted = cleanup_orphaned_uploads(dry_run=args.dry_run)

    print(f"\n{'='*60}")
    print("Cleanup complete!")
    print(f"Files kept: {kept}")
    print(f"Files {'to delete' if args.dry_run else 'deleted'}: {deleted}")
    print(f"{'='*60}\n")
