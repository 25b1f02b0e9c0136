#!/usr/bin/env python3
from __future__ import annotations

import logging

from ebsite.config import Settings
from ebsite.infra.db import init_db


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    settings = Settings.from_env()
    init_db(settings.db_path, profile_seed_path=settings.profile_seed_path)
    print(f"OK -> {settings.db_path}")


if __name__ == "__main__":
    main()
