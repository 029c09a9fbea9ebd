"""
Pattern Demos
=============

Runs the pattern demonstrations by name.

Usage:
    python pattern_demos.py                  # run all
    python pattern_demos.py builder facade   # run selected
"""

import sys
from typing import Callable, Dict, List, Optional

import discount_strategy
import notification_factory
import order_builder
import order_facade
import payment_adapter
import payment_gateway
import product_bundle
import product_decorator


DEMOS: Dict[str, Callable[[], None]] = {
    "strategy": discount_strategy.main,
    "builder": order_builder.main,
    "factory": notification_factory.main,
    "singleton": payment_gateway.main,
    "adapter": payment_adapter.main,
    "composite": product_bundle.main,
    "decorator": product_decorator.main,
    "facade": order_facade.main,
}


def run(names: Optional[List[str]] = None) -> int:
    """Run named demos (all when empty), returns number run"""
    selected = names or list(DEMOS)
    count = 0
    for name in selected:
        demo = DEMOS.get(name.lower())
        if demo is None:
            print(f"Unknown pattern '{name}'. Available: {', '.join(DEMOS)}")
            continue
        demo()
        print()
        count += 1
    return count


def main(argv: Optional[List[str]] = None):
    args = sys.argv[1:] if argv is None else argv
    run(args)


if __name__ == "__main__":
    main()
