import sys

from image_generator.server import main

sys.exit(main())
