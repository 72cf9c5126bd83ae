from .reader import ByteReader, Position

__all__ = ['ByteReader', 'Position']
