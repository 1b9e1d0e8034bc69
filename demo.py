import logging
import os
from pathlib import Path

from redblack.diagnostics import configure_from_env, write_snapshot
from redblack.query.sample import build_sample_range_tree

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()


def main(output_dir: str | Path = ".", lo: int = 19, hi: int = 77) -> list[int]:
    configure_from_env()

    tree = build_sample_range_tree()
    path = write_snapshot(tree, Path(output_dir) / "tree.json")
    logger.info(f"Wrote tree snapshot to {path}")

    keys = tree.values_in_range(lo, hi)
    logger.info(f"Values in range [{lo}, {hi}] -> {keys}")
    return keys


if __name__ == "__main__":
    main()
