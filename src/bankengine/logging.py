"""
Loggers for the bankengine package.

Every module logs under the ``bankengine`` hierarchy
(``bankengine.bank``, ``bankengine.safety``, ...). What each level carries:

- INFO : one line per commit verdict and per closed epoch
- WARNING : operations batches discarded by `Bank.end_epoch`
- DEBUG : every request, and the blocked loans of an UNSAFE simulation
- DEEP (5) : every grant of the loan simulation together with the
  working budget; guarded with ``isEnabledFor`` since the simulation
  is O(n^2)

`configure` applies the ``logging`` section accepted by `Bank.init`: a
``default_level`` for the ``bankengine`` logger and a ``modules`` mapping
of per-module overrides. Level names are resolved by `level_from_name`,
which also understands ``"DEEP_DEBUG"``.

Examples
--------
>>> import bankengine as be
>>> bank = be.Bank.init(
...     logging={"default_level": "WARNING", "modules": {"safety": "DEEP_DEBUG"}}
... )
>>> be.logging.getLogger("bankengine.safety").isEnabledFor(be.logging.DEEP_DEBUG)
True
"""

import logging
from typing import Any

(CRITICAL, ERROR, WARNING, INFO, DEBUG) = (
    logging.CRITICAL,
    logging.ERROR,
    logging.WARNING,
    logging.INFO,
    logging.DEBUG,
)
DEEP_DEBUG = 5
logging.addLevelName(DEEP_DEBUG, "DEEP")

ROOT_LOGGER_NAME = "bankengine"


class BankLogger(logging.Logger):
    """Logger handed out inside bankengine; adds `deep` for level 5."""

    def deep(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log *msg* at DEEP_DEBUG, e.g. a single simulated loan grant."""
        if self.isEnabledFor(DEEP_DEBUG):
            self._log(DEEP_DEBUG, msg, args, **kwargs)


# every logger created after import is a BankLogger
logging.setLoggerClass(BankLogger)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S",
)


def getLogger(name: str | None = None) -> BankLogger:
    """Module logger with `deep` available; use ``getLogger(__name__)``."""
    return logging.getLogger(name)  # type: ignore[return-value]


def level_from_name(name: str) -> int:
    """Translate a level name (``"DEEP_DEBUG"``, ``"info"``, ...) to its number."""
    upper = name.upper()
    if upper == "DEEP_DEBUG":
        return DEEP_DEBUG
    return int(getattr(logging, upper))


def configure(log_config: dict[str, Any]) -> None:
    """
    Apply a logging configuration section to the bankengine loggers.

    Parameters
    ----------
    log_config : dict
        Mapping with keys:
        - default_level: str (e.g., 'INFO', 'DEBUG')
        - modules: dict[str, str] (per-module overrides, e.g. {"safety": "DEBUG"})
    """
    default_level = log_config.get("default_level", "INFO")
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(level_from_name(default_level))

    for module_name, level in log_config.get("modules", {}).items():
        logger_name = f"{ROOT_LOGGER_NAME}.{module_name}"
        logging.getLogger(logger_name).setLevel(level_from_name(level))
