
from .models import EmotionTag, Analysis, ClarityScores, LABELS
from .engine import analyze
from .detectors import collect_labels
from .clarity import score_clarity, extract_summary, split_sentences
from .communication import analyze_communication_style, check_grammar, format_grammar_report
