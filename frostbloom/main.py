from frostbloom import config
from frostbloom.engine import Engine


def main() -> None:
    cfg = config.FrostConfig()
    config.configure_logging(cfg)
    engine = Engine(cfg)
    engine.run()


if __name__ == "__main__":
    main()
