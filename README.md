# securedtable

A small chained hash table whose keys are hashed with SHA-256, together with
the building blocks it uses: a singly linked list and a minimal `printf`.
It has no dependencies outside the standard library.

## Installation

```
pip install securedtable
```

## Hash table

```python
from securedtable.hashtable import HashTable, hash_key

table = HashTable(hash_key, 3)
table.insert("uiheguihziughiu", "value")
print(table.search("uiheguihziughiu"))   # value
print(table.search("missing"))           # None

table.dump()
# [0]:
# > 2110624758 - value
# [1]:
# [2]:

table.delete("uiheguihziughiu")
print(table.is_empty())                  # True
```

`hash_key(key, size)` takes the SHA-256 digest of the key (text is UTF-8
encoded), reads the 32-bit big-endian word at position `size % 8`, treats it
as a signed integer and returns its absolute value. Any callable taking
`(key, size)` and returning an integer can be passed as the hash function
instead.

Entries are `HashedData` objects holding the hashed key and the value, kept
in bucket `hashed_key % size`. Keys are compared by their hashed value only,
so two keys with the same hash share one entry.

- `insert(key, value)` stores the value, replacing the value of an entry
  with the same hashed key. A `None` key or value raises `TypeError`.
- `search(key)` returns the stored value, or `None`.
- `delete(key)` removes the entry and raises `KeyError` if it is absent.
- `dump(file=None)` writes every bucket and its entries, to standard output
  by default.
- `is_empty()` tells whether no bucket holds an entry; `clear()` empties
  every bucket.

Creating a table with a size of zero or less raises `ValueError`.

## Linked list

```python
from securedtable.linked_list import LinkedList

items = LinkedList([1, 2])
items.push_front(0)
items.push_back_all(3, 4)
items.reverse()
print(list(items), len(items))           # [4, 3, 2, 1, 0] 5
```

`LinkedList` is made of `Node` objects (`data`, `next`); `nodes()` yields
them from head to tail. `push_front` and `push_back` return the new node,
and `push_front(None)` raises `ValueError`. `pop_front()` removes the head
and returns its data, raising `IndexError` on an empty list.
`delete_node(node)` unlinks a node, ignores `None`, and raises `ValueError`
for a node not in the list. `clear()` removes every node.

## printf

```python
from securedtable.printf import printf, render, format_number

printf("%s has %d items%c\n", "list", 3, "!")
print(render("100%%"))                   # 100%
print(format_number(-2147483648))        # -2147483648
```

Supported conversions are `%d`, `%i`, `%s`, `%c` and `%%`; other
specifiers produce nothing, and a lone `%` at the end is written as is.
Numbers are wrapped to signed 32-bit integers. `printf` and `put_nbr`
write to standard output unless given `file=` and return the number of
characters written. Too few arguments raise `TypeError`.

## SHA-256

```python
from securedtable.sha256 import sha256_digest

print(sha256_digest(b"abc").hex())
```

`sha256_digest` accepts bytes-like objects or text and returns the 32-byte
digest.

## What it does not do

The table lives in memory only: it has no storage, no resizing and no
command-line program.