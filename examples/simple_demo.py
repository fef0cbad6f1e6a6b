"""
Simple demonstration of an Elo list ranked by repeated comparisons.
"""

import random

from elo_list import ComparisonSession, SimpleJudge, parse_list


LIST_TEXT = """
The Left Hand of Darkness
Dune (650)
Foundation (>584, <616)
Hyperion
Neuromancer (612.5)
"""

# Hidden "true" preferences used in place of a person clicking buttons
TRUE_ORDER = ["Dune", "Hyperion", "The Left Hand of Darkness", "Neuromancer", "Foundation"]


def main():
    print("Elo List Demonstration")
    print("----------------------")

    document = {"text": LIST_TEXT}

    def read_text():
        return document["text"]

    def write_text(text):
        document["text"] = text
        return True

    def mock_choose(item_a, item_b):
        if TRUE_ORDER.index(item_a.title) < TRUE_ORDER.index(item_b.title):
            return "A", f"{item_a.title} is preferred", 1.0
        return "B", f"{item_b.title} is preferred", 0.0

    judge = SimpleJudge(compare_fn=mock_choose)
    session = ComparisonSession(read_text, write_text, judge.compare, rng=random.Random(42))

    print("\nInitial list:")
    for item in parse_list(document["text"]):
        print(f"{item.estimated_strength:>8.2f}  {item.title}")

    for result in session.run(30):
        print(f"{result.winner.title} beat {result.loser.title}")

    print("\nFinal list:")
    print(document["text"])


if __name__ == "__main__":
    main()
