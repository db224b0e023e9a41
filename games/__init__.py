"""Games built on arcadekit."""
