# Importing the source modules registers them
from . import apollo, github, gravatar  # noqa: F401
