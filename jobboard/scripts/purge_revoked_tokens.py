"""Delete revocation ledger entries whose token has already expired."""
from jobboard.core.security import utcnow
from jobboard.database import SessionLocal
from jobboard.logging_config import setup_logging
from jobboard.repos import revoked_token_repo


def main() -> int:
    setup_logging()
    db = SessionLocal()
    try:
        removed = revoked_token_repo.purge_expired(db, utcnow())
    finally:
        db.close()
    print(f"Purged {removed} expired revoked token(s).")
    return removed


if __name__ == "__main__":
    main()
