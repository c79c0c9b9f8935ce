from app.rates.extractor import RateExtractor
from app.rates.factory import RateExtractorFactory
from app.rates.validator import validate_candidates

__all__ = ["RateExtractor", "RateExtractorFactory", "validate_candidates"]
