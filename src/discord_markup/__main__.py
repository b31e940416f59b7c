import logging
import sys
from pathlib import Path

from discord_markup.config import load_config
from discord_markup.markup import MarkupRenderer

logging.basicConfig(level=logging.INFO, stream=sys.stderr)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """アプリケーションのエントリーポイント

    引数のファイル（省略時は標準入力）をレンダリングし、HTMLを標準出力に書き出す。
    """
    args = sys.argv[1:] if argv is None else argv

    try:
        config = load_config(Path("config.yaml"))
    except ValueError as e:
        logger.error("Failed to load config: %s", e)
        return 1
    logger.info("Config loaded: theme=%s, extended=%s", config.theme.value, config.extended)

    if args:
        inpath = Path(args[0])
        if not inpath.exists():
            logger.error("Input file not found: %s", inpath)
            return 1
        try:
            text = inpath.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to read input file %s: %s", inpath, e)
            return 1
    else:
        text = sys.stdin.read()

    renderer = MarkupRenderer(extended=config.extended)
    sys.stdout.write(renderer.render(text, config.theme))
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
