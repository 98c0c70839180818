from reflection_engine import analyze, analyze_communication_style, check_grammar, format_grammar_report

# sample reflections
samples = [
    "The cat sat on the mat.",
    "I feel so stressed and overwhelmed today",
    "I always mess this up and I never get it right. Why do I keep doing this? "
    "I should be better at planning, but everyone else seems to manage because they start early.",
]

for text in samples:
    print("=== Reflection ===")
    print(text)
    print(analyze(text).to_dict())

speech = "so i was thinking we could maybe move the meeting to thursday"
print("\n=== Communication ===")
print(list(analyze_communication_style(speech)))
print(format_grammar_report(check_grammar(speech)))
