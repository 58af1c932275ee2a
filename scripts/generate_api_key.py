import argparse
from pathlib import Path
import sys

if __package__ is None or __package__ == "":
    sys.path.append(str(Path(__file__).resolve().parents[1]))

from reflections_api.core.security import generate_api_key, hash_api_key
from reflections_api.db.session import get_session_factory
from reflections_api.models.api_key import ApiKey


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create an API key for the mutating endpoints.")
    parser.add_argument("--name", default="Admin Dashboard Key", help="Display name stored with the key.")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    raw_key = generate_api_key()
    session_factory = get_session_factory()
    with session_factory() as db:
        api_key = ApiKey(key_hash=hash_api_key(raw_key), name=args.name)
        db.add(api_key)
        db.commit()
        db.refresh(api_key)
        key_id = api_key.id

    print("=====================================")
    print(f"Key ID: {key_id}")
    print(f"API Key: {raw_key}")
    print("=====================================")
    print("Copy this key now, it is not stored and cannot be shown again.")
    print(f"Send it as: Authorization: Bearer {raw_key}")


if __name__ == "__main__":
    main()
