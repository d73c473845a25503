"""Sort integers with two stacks and the push_swap operation set."""

__version__ = "1.0.0"
__all__ = ["stack", "parsing", "sorting", "cli", "libft"]