import logging
import os

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "hide"

from game_instances.local_loop import LocalLoop  # noqa: E402


def main():
    logging.basicConfig(
        level=os.environ.get("SNAKE_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    LocalLoop().run()


if "__main__" == __name__:
    main()
