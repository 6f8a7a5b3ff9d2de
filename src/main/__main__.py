"""
Run the training worker with ``python -m src.main``.

The API is served separately, e.g. ``uvicorn src.main.app:app``.
"""

from .worker import main

if __name__ == "__main__":
    main()
