from __future__ import annotations
import sys
from screen_core.norms import AGE_NORMS, check_partition, norm_for_age
from screen_core.errors import NormTableError
from screen_core.config import AGE_MIN, AGE_MAX, FITTS_ADJUST_MS

def main() -> int:
    print(f"Age norms (reaction limits include +{FITTS_ADJUST_MS}ms Fitts' allowance):\n")
    for n in AGE_NORMS:
        print(f"  {n.icon} {n.label:<16} ages {n.min_age:>2}-{n.max_age:<2}  span={n.memory_span}  "
              f"rt<={n.reaction_time_limit}ms  accuracy>={n.accuracy_threshold}%")
    try:
        check_partition(AGE_NORMS, AGE_MIN, AGE_MAX)
    except NormTableError as exc:
        print(f"\nFAIL: {exc}")
        return 1
    # every supported age must resolve to the band that contains it
    for age in range(AGE_MIN, AGE_MAX + 1):
        if not norm_for_age(age).contains(age):
            print(f"\nFAIL: age {age} resolves to the wrong band")
            return 1
    print(f"\nOK: ages {AGE_MIN}-{AGE_MAX} covered with no gaps or overlaps.")
    return 0

if __name__ == "__main__":
    sys.exit(main())
