from .error_handler import cli_syn_error_handler

__all__ = ("cli_syn_error_handler",)
