__version__ = "0.1.0"

import logging

logging.TRACE = logging.DEBUG - 1
logging.addLevelName(logging.TRACE, "TRACE")


class Logger(logging.getLoggerClass()):
    def trace(self, msg, *args, **kwargs):
        if self.isEnabledFor(logging.TRACE):
            self._log(logging.TRACE, msg, args, **kwargs)


logging.setLoggerClass(Logger)


def init_logging(log_level: str):
    """
    Initialize logging with a StreamHandler set to log_level
    Args:
        log_level: str, log level
    """
    log = logging.getLogger(__name__)
    log.setLevel(logging.TRACE)  # set root logger to lowest level
    formatter = logging.Formatter("[%(asctime)s] %(levelname)s [%(name)s] %(message)s")
    sh = logging.StreamHandler()
    sh.setFormatter(formatter)
    sh.setLevel(getattr(logging, log_level.upper()))
    log.addHandler(sh)
    return log


from tronkeys.exceptions import DerivationError  # noqa: E402
from tronkeys.exceptions import EncodingError  # noqa: E402
from tronkeys.exceptions import TronKeysError  # noqa: E402
from tronkeys.wallet import derive_address_from_mnemonic  # noqa: E402
from tronkeys.wallet import derive_addresses  # noqa: E402
from tronkeys.wallet import private_key_to_address  # noqa: E402
