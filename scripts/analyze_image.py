import argparse
import json
import logging
import sys

from lucidad.container import ServiceContainer
from lucidad.utils.app_utils import AppError, load_env_vars
from lucidad.utils.exceptions import LucidAdError
from lucidad.utils.log_utils import setup_logger, quiet_sdk_loggers
from lucidad.utils.url_utils import load_image_file

logger = setup_logger(__name__, logging.INFO)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Fact-check an advertisement image.")
    parser.add_argument("image", help="Path to a local image file")
    parser.add_argument("--env", default=None, help="Optional .env file with ANTHROPIC_API_KEY")
    args = parser.parse_args(argv)

    load_env_vars(args.env)
    quiet_sdk_loggers()

    try:
        data_url = load_image_file(args.image)
    except (OSError, ValueError) as e:
        print(e, file=sys.stderr)
        return 2

    container = ServiceContainer.create_real()
    try:
        result = container.analyzer.analyze(data_url)
    except LucidAdError as e:
        print(json.dumps({"error": e.payload}, indent=2), file=sys.stderr)
        return 1
    except Exception as e:
        logger.error(AppError.from_exception("analyze_image", e))
        return 1
    finally:
        container.llm.adapter.close()

    print(json.dumps(result.model_dump(mode="json"), indent=2))
    print(f"\n{result.productName or 'Unknown product'} ({result.company or 'Unknown company'}): "
          f"{result.display_score()}% [{result.score_band()}]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
