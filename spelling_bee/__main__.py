import sys

from spelling_bee.app.app import main

if __name__ == "__main__":
    sys.exit(main())
