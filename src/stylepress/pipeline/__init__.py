from stylepress.pipeline.compression import SEPARATOR, CompressionPipeline

__all__ = ["CompressionPipeline", "SEPARATOR"]
