import time

def time_function(func):
    """
    Decorator to measure the execution time of a function
    """
    def wrapper(*args, **kwargs):
        start_time = time.time()
        result = func(*args, **kwargs)
        end_time = time.time()
        execution_time = end_time - start_time
        return result, execution_time
    return wrapper

def is_sorted(sequence):
    return all(not (sequence[i] < sequence[i - 1]) for i in range(1, len(sequence)))

def runs_in_order(sequence):
    """Group the indices of equal values, groups ordered by first occurrence.

    Uses only comparisons, so values need not be hashable.
    """
    order = sorted(range(len(sequence)), key=sequence.__getitem__)
    runs = []
    for i in order:
        if runs and not (sequence[runs[-1][0]] < sequence[i]):
            runs[-1].append(i)
        else:
            runs.append([i])
    runs.sort(key=lambda run: run[0])
    return runs
