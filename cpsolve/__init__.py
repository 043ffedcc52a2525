"""Solutions to classic competitive programming problems, one module per problem."""

__version__ = "0.1.0"