# Import models so Base metadata is aware of them
from .auth import User  # noqa: F401
