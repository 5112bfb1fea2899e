"""
Configuration for the opasm lexer.
"""

from dataclasses import dataclass


@dataclass
class LexerConfig:
    """Configuration parameters shared by the input stream and tokenizer"""
    
    # Name reported in every SourceLocation
    filename: str = "<input>"
    
    # Bytes requested from the underlying source per read
    chunk_size: int = 8192
    
    def __post_init__(self):
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")
