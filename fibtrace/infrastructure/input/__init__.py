from fibtrace.infrastructure.input.stream_number_source import StreamNumberSource

__all__ = ["StreamNumberSource"]
