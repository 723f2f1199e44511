"""
Create a GitHub repository for a local Git repository

``ghcreate`` looks up or creates a repository on GitHub (or a GitHub
Enterprise host) for the Git repository in the current directory and then sets
it as the local repository's ``origin`` remote, taking care never to create a
duplicate repository or to clobber an existing ``origin`` that points
somewhere else.

Visit <https://github.com/jwodder/ghcreate> for more information.
"""

from importlib.metadata import version

__version__ = version("ghcreate")
__author__ = "John Thorvald Wodder II"
__author_email__ = "ghcreate@varonathe.org"
__license__ = "MIT"
__url__ = "https://github.com/jwodder/ghcreate"
