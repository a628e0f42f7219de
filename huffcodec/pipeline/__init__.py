from huffcodec.pipeline.config import CodecConfig
from huffcodec.pipeline.runner import decode_file, encode_file


def run_batch_on_folder(*args, **kwargs):
    # Deferred: huffcodec.utils.batch imports huffcodec.pipeline.config itself.
    from huffcodec.utils.batch import run_batch_on_folder as _run_batch_on_folder

    return _run_batch_on_folder(*args, **kwargs)


__all__ = [
    "CodecConfig",
    "decode_file",
    "encode_file",
    "run_batch_on_folder",
]
