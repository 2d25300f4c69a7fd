"""
Demo script showing the predicate styles side by side.

This script demonstrates:
1. Building Person records
2. Filtering with an annotated lambda, an inline function and a named function
3. Printing the matches under both call-style headers
4. Running the full demonstration through main()
"""

from lambdas import (
    CallStyle,
    Person,
    Predicate,
    apply_age_range,
    display_people,
    filter_people,
    main,
)

people = [
    Person(name="Ando", age=47),
    Person(name="Danika", age=48),
    Person(name="Margie", age=12),
    Person(name="Bart", age=13),
]

# Example 1: Filtering with an annotated lambda
print("=" * 60)
print("Example 1: Annotated lambda")
print("=" * 60)

teen_filter: Predicate = lambda p: 10 < p.age < 20
print(filter_people(people, teen_filter))

# Example 2: Same filter, different spellings
print("\n" + "=" * 60)
print("Example 2: Every spelling agrees")
print("=" * 60)


def stepwise(p):
    greater_than_10 = p.age > 10
    less_than_20 = p.age < 20
    return greater_than_10 and less_than_20


for predicate in (teen_filter, stepwise, apply_age_range):
    print(f"{getattr(predicate, '__name__', predicate)!s:>20}: {filter_people(people, predicate)}")

# Example 3: Report under each call style
print("\n" + "=" * 60)
print("Example 3: Report headers")
print("=" * 60)

for style in CallStyle:
    display_people("Dogs", people, apply_age_range, style)
    print()

# Example 4: The full demonstration
print("=" * 60)
print("Example 4: main()")
print("=" * 60)

main()
