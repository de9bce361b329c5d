from concurrent.futures import Future

from ripple import Observable, empty, error, from_future, of

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Defining an observable")
print("-" * 100)
print()


# An observable is just a subscription function. Nothing runs until you subscribe.
def count_to_three(on_next, on_error, on_complete):
    for i in range(1, 4):
        on_next(i)
    on_complete()
    return lambda: None


numbers = Observable(count_to_three)

log_value = lambda value: print(f"Value: {value}")
log_done = lambda: print("Done")

numbers.subscribe(log_value, on_complete=log_done)

# Subscribing again runs the work again.
numbers.subscribe(log_value)

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Transforming observables")
print("-" * 100)
print()

# map and filter, or the >> and & operators.
numbers.map(lambda x: x * 10).subscribe(log_value)
(numbers >> (lambda x: x * x) & (lambda x: x > 1)).subscribe(log_value)

# Errors are events. map_error turns them into values.
error(ValueError("boom")).map_error(lambda e: f"recovered from {e}").subscribe(log_value)

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Combining observables")
print("-" * 100)
print()

# concat runs the second after the first, merge runs both at once (| and + work too).
(of("first") + of("second")).subscribe(log_value)
(of("left") | of("right")).subscribe(log_value, on_complete=log_done)

# zip pairs values by index.
letters = of("a").concat(of("b")).concat(of("c"))
numbers.zip(letters, lambda n, s: f"{n}{s}").subscribe(log_value)

# chain flattens the observables produced by a function.
numbers.chain(lambda n: of(n).concat(of(-n))).subscribe(log_value)

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Asynchronous sources")
print("-" * 100)
print()

future = Future()
cancel = (
    from_future(lambda: future)
    .start_with("waiting...")
    .concat(empty())
    .subscribe(log_value, on_complete=log_done)
)

future.set_result("the future resolved")
cancel()
