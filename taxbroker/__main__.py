import dotenv
import sys
import logging
from taxbroker import bot, errors

if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    logging.info(f"Python Version: {sys.version}")
    dotenv.load_dotenv()

    try:
        bot.run_taxbroker()
    except errors.ConfigurationError as error:
        logging.critical(f"could not start taxbroker: {error}")
        sys.exit(1)
