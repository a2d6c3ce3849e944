from bundle_stats_metrics.domain.protocols.output_writer_protocol import OutputWriterProtocol

__all__ = [
    "OutputWriterProtocol",
]
