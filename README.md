# structkit

Classic data structures, simulated memory pools, task schedulers and small
algorithms, written in plain Python with no third-party dependencies.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Containers

- `structkit.dll.DoublyLinkedList`: a doubly linked list with head and tail
  sentinels. `begin()` and `end()` return `Node` positions; `insert(where, data)`
  inserts before a position and `remove(where)` returns the following node.
  Also `push_front`, `push_back`, `pop_front`, `pop_back` and `multi_find`.
  The module has the free functions `find`, `for_each` and `splice`.
- `structkit.sll.SinglyLinkedList`: a singly linked list ending in a sentinel,
  with `insert`, `remove`, `append(other)` and `flip()`. The module also has
  `find`, `for_each`, `has_loop` and `find_intersection`.
- `structkit.stack.Stack(capacity)`: a bounded stack. Pushing onto a full
  stack raises `OverflowError`; popping or peeking an empty one raises
  `IndexError`.
- `structkit.fifo.Queue`: a FIFO queue with `enqueue`, `dequeue`, `peek` and
  `append(other)`, which moves every item of `other` to the back.
- `structkit.cbuffer.CircularBuffer(capacity)`: a byte ring. `write(data)`
  writes as much as fits and returns the count; `read(count)` returns up to
  `count` bytes. It raises `BufferFullError` and `BufferEmptyError`.
- `structkit.dvec.DynamicVector(capacity)`: tracks a capacity (at least 2)
  that grows by 1.5x when full and shrinks when the vector becomes sparse.
- `structkit.sortedlist.SortedList(compare)`: a list kept in ascending order
  by a three-way `compare`, with `find`, `find_custom`, `for_each` and
  `merge(source)`, which empties `source` into the list.
- `structkit.priority_queue.PriorityQueue(compare)`: built on a sorted list;
  the front is the element `compare` orders first.
- `structkit.heap.Heap(compare)` and `structkit.pq_heap.HeapPriorityQueue`:
  a binary heap whose top is the element `compare` ranks greatest.
- `structkit.hashtable.HashTable(hash_func, is_equal, capacity)`: separate
  chaining over a fixed number of buckets.
- `structkit.avl.AVLTree(compare)`: a self-balancing tree storing each equal
  element once. `for_each` returns the sum of the action's results;
  `multi_find` and `multi_remove` return lists of matching elements.
- `structkit.bst.BinarySearchTree(compare)`: an unbalanced tree with node
  positions, `begin`, `end`, in-order `next` and `prev`, and `for_each`.

## Bits

- `structkit.bits64` treats an integer as a 64-bit array: `get`, `set_on`,
  `set_off`, `flip`, `count_on`, `count_on_lut`, `count_off`, `reset_all`,
  `set_all`, `rotate_left`, `rotate_right`, `mirror` and `to_string`.
- `structkit.bit_problems` holds 32-bit puzzles: `is_power_of_two`,
  `count_one_bits`, `find_unique`, `reverse_bits`, `reverse_bits_no_loop`,
  `find_missing_number`, `product_sign`, `find_two_unique`, `left_rotate`,
  `right_rotate` and `swap_bits`.

## Scheduling

- `structkit.uid.generate()` returns a `Uid` made of a counter, a timestamp,
  the process id and a host id.
- `structkit.task.Task` is a function to run at a given time;
  `structkit.task.is_before` orders tasks by time.
- `structkit.scheduler.Scheduler` runs tasks at their due time, earliest
  first, sleeping until the next one is due. A task's function returns the
  delay before it runs again; any non-zero value reschedules it.
  `stop()` makes `run()` return after the current task.
- `structkit.sched_heap.HeapScheduler` keeps its tasks in a heap. Each new
  task's time is pushed back one second per task already held, and only a
  positive delay reschedules a task.

## Memory pools

Both allocators manage a caller-supplied `bytearray` and hand out byte
offsets into it.

- `structkit.fsa.FixedSizeAllocator(pool, block_size, block_count)`: blocks
  of one size; size the pool with `min_pool_size`. `allocate()` raises
  `MemoryError` when no block is left.
- `structkit.vsa.VariableSizeAllocator(pool)`: blocks of any size, merging
  neighbouring free blocks; `largest_free_block()` reports the biggest
  request that would succeed.

## Other tools

- `structkit.calculator.calculate(expression)` evaluates numbers with
  `+ - * / ^` and parentheses. Operators of equal precedence, `^` included,
  group from the left, and whitespace is not accepted. It raises
  `InvalidInputError` or `DivisionByZeroError`, both `CalculatorError`s.
- `structkit.dhcp.Dhcp(subnet, mask)` hands out host addresses of an IPv4
  subnet from a binary trie, reserving the network, server and broadcast
  addresses. `allocate_ip` returns 4 bytes; `free_ip` releases one.
- `structkit.ktour` finds knight's tours on an 8x8 board by backtracking
  (`knight_tour`) or by Warnsdorff's rule (`warnsdorff_tour`).
- `structkit.shell.run_command(command, use_fork)` runs a command line
  directly or through the system shell and prints its exit status.
- `structkit.exercises` has list reversal, maximum subarray sum, stack
  sorting, BST insertion, string reversal, permutations and `sort_chars`
  for a text file.
- `structkit.playground` has stack sorting, a thread-safe `BoundedBuffer`
  and small 8- and 32-bit tricks.

## Examples

```python
from structkit.calculator import calculate
from structkit.heap import Heap

print(calculate("2+3*4"))  # 14.0

heap = Heap(lambda a, b: (a > b) - (a < b))
for value in (5, 1, 9, 3):
    heap.push(value)
print(heap.pop())  # 9
```

```python
from structkit.dhcp import Dhcp

pool = Dhcp(bytes([192, 168, 1, 0]), 24)
address = pool.allocate_ip(None)
print(pool.count_free())
pool.free_ip(address)
```

## Commands

Print knight's tours from a board square (0-63); `--method` chooses
`backtrack`, `warnsdorff` or `both` (the default):

```
structkit-ktour 0
```

Run commands read from standard input, one per line, until `exit` or the end
of input; `--system` runs each through the system shell:

```
structkit-shell
```

## What it does not do

- `Dhcp` only keeps track of addresses; it does not speak the DHCP protocol
  or serve a network.
- The allocators manage offsets inside a Python byte array; they do not
  allocate process memory.
- `structkit-shell` shows no prompt and has no built-in commands besides
  `exit`.