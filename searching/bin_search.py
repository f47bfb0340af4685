import random

from line_profiler import profile

from searching.config import load_settings

MIN = 1000
MAX = 10000
NOT_FOUND = -1


@profile
def generate_sorted_random_array(n: int, low: int = MIN, high: int = MAX, seed=None) -> list[int]:
    rng = random.Random(seed)
    arr = [rng.randint(low, high) for _ in range(max(n, 0))]
    arr.sort()
    return arr


@profile
def binary_search(arr, target):
    """Return the index of ``target`` in the ascending sequence ``arr``, or -1.

    ``arr`` must be sorted ascending under the same ordering used to compare
    ``target``; this is not checked. When several elements equal ``target``
    the index returned is one of them, but which one is unspecified.
    """
    low, high = 0, len(arr) - 1
    while low <= high:
        mid = (low + high) // 2
        if arr[mid] == target:
            return mid
        elif arr[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return NOT_FOUND


@profile
def main():
    settings = load_settings()
    size = settings["array_size"]
    low, high = settings["min"], settings["max"]
    array = generate_sorted_random_array(size, low, high)
    if not array:
        print("Array is empty, nothing to search")
        return
    first = array[0]
    last = array[-1]
    middle = array[len(array) // 2]
    el_les = low - 1
    el_grt = high + 1
    print(f"First : {first} , Last : {last} , Middle : {middle} , Element < MIN : {el_les} , Element > MAX {el_grt}")

    print(f"Bin Search First Element : {binary_search(array, first)}")
    print(f"Bin Search Last Element : {binary_search(array, last)}")
    print(f"Bin Search Middle Element : {binary_search(array, middle)}")
    print(f"Bin Search Element < {low}  : {binary_search(array, el_les)}")
    print(f"Bin Search Element > {high}  : {binary_search(array, el_grt)}")


if __name__ == "__main__":
    main()
