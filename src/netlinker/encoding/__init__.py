from ._json_encoder import JSONParameterEncoder
from ._parameter_encoding import ParameterEncoder, ParameterEncoding
from ._url_encoder import URLParameterEncoder, stringify

__all__ = [
    "JSONParameterEncoder",
    "ParameterEncoder",
    "ParameterEncoding",
    "URLParameterEncoder",
    "stringify",
]
