"""Seed the database with a placeholder AboutMe profile.

Usage::

    python -m app.scripts.init_db           # only if no profile exists
    python -m app.scripts.init_db --reset   # overwrite the stored profile
"""

from __future__ import annotations

import argparse
import logging

from app.core.errors import NotFoundError
from app.core.logging import setup_logging
from app.db import mongo
from app.models.about import AboutMeUpdate
from app.services.about import get_about, upsert_about

logger = logging.getLogger(__name__)

PLACEHOLDER_ABOUT: dict[str, object] = {
    "name": "Your Name",
    "title": "Full Stack Developer",
    "bio": "A passionate developer with experience in modern web technologies",
    "location": "Your Location",
    "phone": "+1 (123) 456-7890",
    "email": "your.email@example.com",
    "socialLinks": {
        "github": "https://github.com/yourusername",
        "linkedin": "https://linkedin.com/in/yourusername",
        "twitter": "https://twitter.com/yourusername",
    },
}


def seed_about(reset: bool = False) -> bool:
    """Write the placeholder profile; return True when something was written."""
    if not reset:
        try:
            get_about()
        except NotFoundError:
            pass
        else:
            logger.info("about_me_already_present")
            return False

    upsert_about(AboutMeUpdate.model_validate(PLACEHOLDER_ABOUT), replace=reset)
    logger.info("about_me_seeded", extra={"reset": reset})
    return True


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--reset",
        action="store_true",
        help="overwrite the existing profile with the placeholder",
    )
    args = parser.parse_args(argv)

    setup_logging()
    try:
        mongo.ping()
        mongo.ensure_indexes()
        seed_about(reset=args.reset)
    finally:
        mongo.close_client()


if __name__ == "__main__":
    main()
