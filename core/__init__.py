"""
Core package for the Oracle process assistant.
"""

from core.assistant import OracleAssistant

__all__ = ["OracleAssistant"]
