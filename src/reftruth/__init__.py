"""REF Truth: explainable depth scoring for claims.

Record a claim with evidence, counters, assumptions and a resonance
reading; the engine turns it into coherence sub-scores, a blended depth
score, a status marker, rigor guidance and plain-language explanations.
"""

__version__ = "0.1.0"
