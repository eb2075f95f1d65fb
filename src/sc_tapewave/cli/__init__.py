"""
SC-TapeWave Command-Line Interface
==================================

- **sctapewave**: Program file to SC-3000 tape audio

Implemented as a Click-based CLI application.

Copyright (c) 2026 SC-TapeWave Contributors
"""

__all__ = ["sctapewave"]
