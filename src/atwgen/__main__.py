"""Allow ``python -m atwgen``."""
from .main import main

if __name__ == '__main__':
    main()
