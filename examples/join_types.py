#!/usr/bin/env python3
"""
Join Types Example
Demonstrates the seven join types and their discarded values on two mappings
built from lists of rows.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "py-mapjoin"))

from mapjoin import MISSING, JoinType, from_iterable, get_discarded_values, join  # type: ignore

USERS = [
    {"id": 1, "name": "Alice"},
    {"id": 2, "name": "Bob"},
    {"id": 3, "name": "Charlie"},
    {"id": 4, "name": "Diana"},
]

ACCOUNTS = [
    {"user_id": 2, "plan": "pro"},
    {"user_id": 4, "plan": "free"},
    {"user_id": 4, "plan": "team"},
    {"user_id": 7, "plan": "free"},
]


def describe(user, account, key):
    name = user["name"] if user else "-"
    plan = account["plan"] if account else "-"
    return f"{key:>3}  {name:<8} {plan}"


def main():
    print("=" * 60)
    print("Join Types Example")
    print("=" * 60)

    users = from_iterable(USERS, lambda row, i: row["id"])
    # Later accounts replace earlier ones for the same user
    accounts = from_iterable(ACCOUNTS, lambda row, i: row["user_id"], "override")

    print(f"\nUsers keys:    {list(users)}")
    print(f"Accounts keys: {list(accounts)}")

    for number, join_type in enumerate(JoinType, start=1):
        print("\n" + "=" * 60)
        print(f"{number}. {join_type.value.upper()} JOIN")
        print("=" * 60)
        joined = join(users, accounts, join_type, describe)
        for line in joined:
            print(f"   {line}")

        dropped = list(get_discarded_values(joined))
        print(f"   discarded: {len(dropped)} value(s)")

    print("\n" + "=" * 60)
    print("Custom select function: keep keys whose user name starts with a vowel")
    print("=" * 60)
    vowels = join(
        users,
        accounts,
        lambda user, account, key: user is not MISSING and user["name"][0] in "AEIOU",
        describe,
    )
    print(vowels.to_pandas(columns=["row"]))

    print("\n" + "=" * 60)
    print("Join types example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
