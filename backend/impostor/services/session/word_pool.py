import logging
from typing import List, Optional

logger = logging.getLogger(__name__)


def load_word_pool(path: Optional[str]) -> List[str]:
    """Read a newline-delimited word list into a list of trimmed words.

    A missing file yields an empty pool. Any other read failure is logged
    and also yields an empty pool, so a broken resource never stops the
    session; automatic rounds will fail later with EmptyWordPool instead.
    """
    if not path:
        return []
    try:
        with open(path, encoding='utf-8') as fh:
            words = [line.strip() for line in fh]
    except FileNotFoundError:
        logger.info(f"[word-pool] no word file at {path}, automatic pool is empty")
        return []
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning(f"[word-pool] could not read {path}: {exc}")
        return []
    words = [w for w in words if w]
    logger.debug(f"[word-pool] loaded {len(words)} words from {path}")
    return words
