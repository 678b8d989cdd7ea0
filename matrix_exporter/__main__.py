"""Runs a single export with the configured url, output path and separator."""

import logging
from matrix_exporter.services.export_service import export_matrix


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    export_matrix()


if __name__ == "__main__":
    main()
