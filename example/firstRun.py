import pycursor
from pycursor import *


setupLogging("DEBUG")


############################ Filtering ############################
numbers = list(range(20))
threes = FilteringCursor(ListCursor(numbers), lambda x: x % 3 == 0)

print("Forward: ", [threes.next() for _ in range(7)])
print("Backward:", [threes.previous() for _ in range(7)])

# drop 9 from the underlying list through the filter
while threes.next() != 9:
    pass
threes.remove()
print("List without 9:", numbers)


############################ Merging ############################
fib = [1, 1, 2, 3, 5, 8, 13, 21]
evens = list(range(0, 20, 2))
odds = list(range(1, 20, 2))

merged = MergeCursor(Comparators.natural, [ListCursor(fib), ListCursor(evens), ListCursor(odds)])
while merged.hasNext():
    value = merged.next()
    print(f"{value:3d} from source {merged.getLastSourceIndex()}")

print("PyCursor version:", pycursor.version())
