# main.py
"""
Entry point: paint an image as database load.

Configuration comes from the environment (see loadpaint.config), topped up
from a .env file in the working directory when one exists:
  IMAGE=path/to/image.png CONNECT_URL=mysql://root:pw@localhost:3306/ python -m loadpaint.main

Flow:
  RunConfig.from_env -> read_image_luma -> MySQLStorage.connect
  -> prepare_tables -> paint
"""

import sys

from dotenv import find_dotenv, load_dotenv

from loadpaint.config import RunConfig
from loadpaint.luma_image import read_image_luma
from loadpaint.mapping import get_mapping
from loadpaint.painter import paint
from loadpaint.provisioner import prepare_tables
from loadpaint.storage import MySQLStorage


def run(config: RunConfig, storage_factory=None):
    image = read_image_luma(config.image)
    print(f"width={image.width}, height={image.height}")
    mapping = get_mapping(config.mapping, image.height)

    print("Connecting")
    connect = storage_factory or MySQLStorage.connect
    storage = connect(config.connect_url)
    try:
        print("Preparing")
        prepare_tables(storage, image.height, config.rows_per_table, config.namespace)

        print("Start painting")
        summary = paint(image, storage, config, mapping)
    finally:
        storage.close()

    print(f"Done. {summary}")
    return summary


def main() -> None:
    # real environment wins over .env; no .env is fine
    load_dotenv(find_dotenv(usecwd=True))
    try:
        config = RunConfig.from_env()
        run(config)
    except Exception as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
