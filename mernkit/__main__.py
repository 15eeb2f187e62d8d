"""Allow ``python -m mernkit create <projectName>``."""

from mernkit.cli import main

if __name__ == "__main__":
    main()
