#!/usr/bin/env python3
"""
Demo: Generate Graphviz DOT diagrams for the example pipelines.

Shows both visualization modes (SIMPLE, TYPED).
"""

from morphisms.examples import build_example_pipelines
from morphisms.backends import generate_dot, DotMode


def main():
    pipelines = build_example_pipelines()

    print("=" * 80)
    print("DOT GENERATOR DEMO")
    print("=" * 80)

    for name in ("shout_length", "arithmetic_chain"):
        for mode in (DotMode.SIMPLE, DotMode.TYPED):
            print(f"\n{name} ({mode.value.upper()} MODE):")
            print("-" * 80)
            print(generate_dot(pipelines[name], mode=mode))

    print("\n" + "=" * 80)
    print("To visualize a diagram, save it to a file and run:")
    print("  dot -Tpng composition.dot -o composition.png")
    print("=" * 80)


if __name__ == "__main__":
    main()
