"""Shop catalog API.

Product catalogue with image sets, user accounts and token based access,
served over FastAPI on top of SQLModel.
"""

__version__ = "0.1.0"
