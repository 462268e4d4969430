from .receiver import ResultReceiver
from .streamer import AudioStreamer
from .handshake import start_session
from .chunks import iter_byte_chunks
from .runner import SessionResult, run_evaluation, EvaluationSessionRunner

__all__ = [
    "AudioStreamer",
    "EvaluationSessionRunner",
    "ResultReceiver",
    "SessionResult",
    "iter_byte_chunks",
    "run_evaluation",
    "start_session",
]
