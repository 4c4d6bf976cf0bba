"""Allow ``python -m ytflow``."""

from ytflow.cli import main

if __name__ == "__main__":
    main()
