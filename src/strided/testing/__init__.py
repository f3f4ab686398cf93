from strided.testing.buffer import CountingBuffer

__all__ = ["CountingBuffer"]
