from __future__ import annotations

from lifx_cloud.cli import main


if __name__ == "__main__":
    main()
