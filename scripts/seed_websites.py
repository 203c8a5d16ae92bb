"""Utility script to provision the demo websites."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from pydantic import ValidationError

from app.application.use_cases import create_website, toggle_website_status
from app.config import get_settings
from app.domain.errors import WebsiteError
from app.infrastructure.website_store import WebsiteStore, build_website_store
from app.schemas import WebsiteCreate, WebsiteRead

logger = logging.getLogger(__name__)

DEMO_WEBSITES: list[dict[str, object]] = [
    {
        "name": "My Personal Blog",
        "subdomain": "johnblog",
        "template_id": "blog",
        "owner": "John Doe",
        "activate": True,
    },
    {
        "name": "Tech Startup",
        "subdomain": "techstartup",
        "template_id": "business",
        "owner": "Jane Smith",
        "activate": True,
    },
    {
        "name": "Online Store",
        "subdomain": "mystore",
        "template_id": "ecommerce",
        "owner": "Mike Johnson",
        "activate": False,
    },
]


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for seeding."""

    parser = argparse.ArgumentParser(
        description="Provision demo websites through the regular creation workflow.",
    )
    parser.add_argument(
        "--file",
        type=Path,
        default=None,
        help="JSON file with a list of websites (defaults to the built-in demo set)",
    )
    parser.add_argument(
        "--owner",
        default=None,
        help="Owner recorded for entries that do not define one",
    )
    return parser.parse_args()


def load_entries(path: Path | None) -> list[dict[str, object]]:
    if path is None:
        return [dict(entry) for entry in DEMO_WEBSITES]
    with path.open("r", encoding="utf-8") as fp:
        payload = json.load(fp)
    if not isinstance(payload, list):
        raise SystemExit("The seed file must contain a JSON list of websites.")
    return payload


def seed(
    store: WebsiteStore,
    entries: list[dict[str, object]],
    *,
    default_owner: str = "seed",
) -> list[WebsiteRead]:
    """Create every entry, activating those flagged with ``activate``."""

    created: list[WebsiteRead] = []
    for entry in entries:
        entry = dict(entry)
        owner = str(entry.pop("owner", None) or default_owner)
        activate = bool(entry.pop("activate", False))
        try:
            payload = WebsiteCreate.model_validate(entry)
            website = create_website(
                store,
                name=payload.name,
                subdomain=payload.subdomain,
                template_id=payload.template_id,
                owner=owner,
                description=payload.description,
            )
            if activate:
                website = toggle_website_status(store, website.id)
        except (ValidationError, WebsiteError) as exc:
            logger.warning("Skipping seed entry %s: %s", entry.get("subdomain"), exc)
            continue
        created.append(
            WebsiteRead.from_entity(website, platform_domain=store.platform_domain)
        )
    return created


def main() -> None:
    """Seed the configured store using the provided command line arguments."""

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    args = parse_args()

    settings = get_settings()
    store = build_website_store(settings)
    created = seed(
        store,
        load_entries(args.file),
        default_owner=args.owner or "seed",
    )
    for website in created:
        print(website.model_dump_json())
    logger.info("Seeded %d websites", len(created))


if __name__ == "__main__":
    main()
