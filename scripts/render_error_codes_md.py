from rest_errors.catalog import build_error_code_catalog, render_catalog_markdown
from rest_errors.config import load_app_config
from rest_errors.logging_utils import configure_logger
from rest_errors.validators import validate_catalog_schema
from rest_errors.writers import save_catalog_markdown


def main() -> None:
    config = load_app_config()
    logger = configure_logger("rest_errors.render", level=config.logging.level)

    catalog = build_error_code_catalog()
    validate_catalog_schema(catalog, logger=logger)

    save_catalog_markdown(
        render_catalog_markdown(catalog),
        config.catalog.output_md_path,
        logger=logger,
    )
    print(f"Wrote {config.catalog.output_md_path}")


if __name__ == "__main__":
    main()
