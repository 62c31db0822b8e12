# objscene/utils/logger.py
# ---------------------------------------------------------------
# Общий логгер пакета – один объект на процесс.
# ---------------------------------------------------------------

import logging


def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("objscene")


logger = init_logger()
