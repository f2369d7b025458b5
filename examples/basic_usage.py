"""
Basic usage example: rank candidate answers with a DSPy judge.
"""

import logging

import dspy
from elo_ranker import RankerConfig, RankingSession


def main():
    logging.basicConfig(level=logging.INFO)

    # Set up DSPy
    lm = dspy.LM("openai/gpt-4o-mini")
    dspy.configure(lm=lm)

    answers = {
        "terse": "Paris.",
        "complete": "Paris is the capital of France and its largest city.",
        "wrong": "Lyon is the capital of France.",
        "hedged": "I believe it is Paris, but I am not completely sure.",
    }

    # Define criteria for comparing answers
    criteria = """
    The question was: What is the capital of France?
    Compare the two answers based on:
    1. Accuracy - Which answer is more factually correct?
    2. Clarity - Which answer is more clearly written?
    """

    session = RankingSession(criteria=criteria, config=RankerConfig(minimum_comparisons=3))
    for answer_id, text in answers.items():
        session.add(answer_id, text)

    session.run(max_comparisons=20, target_progress=1.0, rating_change_threshold=5, stable_comparisons_threshold=3)

    print("\nElo ratings:")
    for answer_id, rating in session.rankings():
        print(f"{answer_id:>10}: {rating:.2f}  {answers[answer_id]}")

    progress = session.ranker.get_progress(rating_change_threshold=5, stable_comparisons_threshold=3)
    print(f"\nStable items: {progress:.0%}")


if __name__ == "__main__":
    main()
