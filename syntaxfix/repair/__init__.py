from syntaxfix.repair.base import BaseFixer
from syntaxfix.repair.client_base import InferenceClient
from syntaxfix.repair.factory import FixerFactory
from syntaxfix.repair.fixer import Fixer
from syntaxfix.repair.response_normalizer import normalize_response

__all__ = ["BaseFixer", "Fixer", "FixerFactory", "InferenceClient", "normalize_response"]
