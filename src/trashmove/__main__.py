# Filename: __main__.py
# Author: Rich Lewis @RichLewis007
# Description: Allows ``python -m trashmove``.

from .cli import main

raise SystemExit(main())
