import logging, sys, pathlib
from listings.loaders import build_dubai_south, build_october, load_json
from listings.settings import setting


def main():
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    dubai_path = pathlib.Path(sys.argv[1] if len(sys.argv) > 1 else setting("data", "dubai_south"))
    october_path = pathlib.Path(sys.argv[2] if len(sys.argv) > 2 else setting("data", "october"))
    for path in (dubai_path, october_path):
        if not path.exists():
            raise SystemExit(f"Data file not found: {path}. Place the datasets under data/.")

    dubai = build_dubai_south(load_json(dubai_path))
    print(f"[OK] {dubai_path}: {dubai.summary()}")
    placeholders = [d.name for d in dubai.developers if d.slug.startswith("auto-")]
    if placeholders:
        print(f"[WARN] No developer profile for: {', '.join(placeholders)}")

    october = build_october(load_json(october_path))
    print(f"[OK] {october_path}: {october.summary()}")
    if not october.projects:
        print(f"[WARN] {october_path} has no projects")

if __name__ == "__main__":
    main()
