from rest_errors.catalog import build_error_code_catalog
from rest_errors.config import load_app_config
from rest_errors.logging_utils import configure_logger
from rest_errors.writers import save_catalog_to_csv


def main() -> None:
    config = load_app_config()
    logger = configure_logger("rest_errors.export", level=config.logging.level)

    catalog = build_error_code_catalog()
    save_catalog_to_csv(catalog, config.catalog.output_csv_path, logger=logger)

    print(f"Wrote {config.catalog.output_csv_path}")


if __name__ == "__main__":
    main()
