"""Chained entry operations on a plain dict and an EntryDict."""

from easy_entry import EntryDict, Present, entry


def main() -> None:
    """Run the modify/retain/insert chains and print the results."""
    groups = {10: ["Hello"]}

    hello_world = (
        entry(groups, 10)
        .and_modify(lambda value: value.append("World"))
        .retain_if(lambda value: len(value) == 2)
        .or_insert(["Default"])
    )
    print("hello_world:", hello_world)

    items = (
        entry(groups, 20)
        .and_modify(lambda value: value.remove("Something from the list"))
        .or_insert_with_key(lambda key: [f"Item Number {key}"])
    )
    print("items:", items)
    print(f"{groups=}")

    counts: EntryDict[str, int] = EntryDict(apples=3)
    _ = counts.entry("apples").replace_with_key(len)
    match counts.entry("pears").remove():
        case Present(value):
            print("removed pears:", value)
        case _:
            print("no pears to remove")
    print(f"{counts=}")


if __name__ == "__main__":
    main()
