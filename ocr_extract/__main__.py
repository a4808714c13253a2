import sys

from ocr_extract.cli import main

sys.exit(main())
