"""
counterlist Quickstart Example

This example walks through what a UI layer does with the store:

1. Open the store (loads counters.json if it exists)
2. Add counters from the new-counter form
3. Increment, decrement, reset, edit and delete
4. Watch changes through a subscription
"""

import tempfile
from pathlib import Path

from counterlist import CounterStore, NewCounterForm, Settings, configure_logging


def main():
    configure_logging("INFO")

    data_dir = Path(tempfile.mkdtemp(prefix="counterlist-"))
    settings = Settings(data_dir=data_dir)

    print("=" * 60)
    print("counterlist Quickstart")
    print("=" * 60)

    with CounterStore.open(settings=settings) as store:
        store.subscribe(lambda e: print(f"  [{e.change_type.value}] size={e.size}"))

        # ======================================================================
        # Add counters through the form
        # ======================================================================
        form = NewCounterForm()
        print(f"\nColors: {', '.join(form.available_colors)}")

        form.name, form.initial_value_text, form.color_name = "Laps", "10", "Red"
        laps = form.submit(store)
        print(f"Added {laps.name} = {laps.value} ({laps.color_hex})")

        form.name, form.initial_value_text, form.color_name = "", "abc", "Neon"
        fallback = form.submit(store)
        print(f"Added {fallback.name} = {fallback.value} ({fallback.color_name})")

        # ======================================================================
        # Change values
        # ======================================================================
        store.increment(laps)
        store.increment(laps)
        store.decrement(fallback)
        print(f"\n{laps.name}: {laps.value}, {fallback.name}: {fallback.value}")

        store.reset(laps)
        store.update(fallback, name="Cups", color_name="Teal")
        print(f"{laps.name}: {laps.value}, {fallback.name}: {fallback.value} ({fallback.color_hex})")

        store.delete(fallback)
        print(f"\nRemaining: {[c.name for c in store.get_all()]}")

    print(f"\nSaved to {settings.save_path}:")
    print(settings.save_path.read_text(encoding="utf-8"))


if __name__ == "__main__":
    main()
