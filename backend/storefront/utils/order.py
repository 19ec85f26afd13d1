def compact_order(items, order_field="order"):
    """
    Sorts items by their current order and re-assigns sequential
    order values (0..N-1) in place. Returns the sorted list.
    """
    items.sort(key=lambda item: item.get(order_field, 0))

    for index, item in enumerate(items):
        item[order_field] = index

    return items
