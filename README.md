# compactmeta

Compact data structures, a FASTA/FASTQ reader and EM-based abundance
estimation for metagenomic read classification. The package is pure Python
and has no runtime dependencies.

## Modules

- `compactmeta.bitvector`
  - `PlainBitvector`: a fixed-length, mutable bit vector with `set`, `clear`,
    `access`, `rank(bit, i, inclusive)`, 1-based `select(bit, i)`, `pred0`
    and `succ0`. You can also build one with `PlainBitvector.from_ones(ones, n)`.
  - `SparseBitvector`: an immutable Elias–Fano bit vector for very few set
    bits. It offers `access`, `rank1` and `select`, and you can build it with
    `SparseBitvector.from_bits(bits)`.
- `compactmeta.alphabet`: `Alphabet` gives each symbol a fixed-width plain
  code. It has `encode`, `decode`, `code_length`, `capacity`, `in` and `len`.
- `compactmeta.gamma`: `gamma_encode` and `gamma_decode` work on Elias gamma
  codes held as `'0'`/`'1'` strings. `GammaArray` is an immutable array of
  non-negative integers stored as gamma codes, with sampled offsets every
  `block_size` elements (64 by default).
- `compactmeta.rmmtree`: `RangeMinMaxTree` covers the excess of a bit
  sequence, where 1 counts +1 and 0 counts −1. It answers `fwd_search` and
  `bwd_search`. Each block and each tree node is summarised by an
  `ExcessSummary`.
- `compactmeta.rmq`: these queries run on a `RangeMinMaxTree`:
  `extreme_excess`, `rmq`, `rmq_max`, `min_count` and `min_select`.
- `compactmeta.tree`: `PlainTree` is a growable ordinal tree held as
  parent/child/sibling links. Node 0 is the root. It has optional edge labels
  through `set_label`, `children_labeled`, `labeled_child_select` and
  `child_label`.
- `compactmeta.louds`: `LoudsTree` is the level-order unary degree sequence
  encoding of a `PlainTree`. It supports navigation (`parent`,
  `child_select`, siblings, `lca`, …) on bit-vector positions. `node_map` and
  `node_select` convert between positions and breadth-first node numbers.
- `compactmeta.seqio`: `read_fastx` yields `FastxRecord` objects (`name`,
  `comment`, `seq`, `qual`) from a string, bytes, a file object or any
  iterable of lines. It raises `FastxError` on a truncated or mismatched
  FASTQ quality string.
- `compactmeta.assignments`:
  - `parse_classification` reads tab-separated classification lines. The
    first line is a header, and the columns are read id, sequence id, tax ID,
    score, second score, hit length and read length. It groups consecutive
    lines of one read into a `ReadAssignment` and merges identical target
    sets.
  - `assignment_weight` gives the weight of one assignment.
  - `coalesce_assignments` merges duplicate assignments.
  - `OutputFormat` names the report layouts: CENTRIFUGER, METAPHLAN and CAMI.
- `compactmeta.abundance`:
  - `accumulate_abundance` forms subtree sums.
  - `redistribute_to_children` passes each parent's excess down to its
    children.
  - `em_update` runs one EM step.
  - `estimate_abundance` runs the whole estimate over a `PlainTree`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from compactmeta.bitvector import PlainBitvector, SparseBitvector

bv = PlainBitvector.from_ones([1, 4, 5, 9], 12)
bv.rank(1, 5)        # 3: ones in positions 0..5
bv.select(1, 3)      # 5: position of the third one

sparse = SparseBitvector([3, 100], 1000)
sparse.select(2)     # 100
```

```python
from compactmeta.alphabet import Alphabet
from compactmeta.gamma import GammaArray, gamma_encode

dna = Alphabet("ACGT")
dna.encode("G")      # 2
gamma_encode(5)      # "00101"
GammaArray([0, 3, 7])[1]   # 3
```

```python
from compactmeta.rmmtree import RangeMinMaxTree
from compactmeta.rmq import rmq

tree = RangeMinMaxTree([1, 1, 0, 0])
tree.fwd_search(0, 0)   # 3: the parenthesis opened at 0 closes at 3
rmq(tree, 1, 3)         # 3
```

```python
from compactmeta.tree import PlainTree
from compactmeta.louds import LoudsTree

tree = PlainTree()
a = tree.add_node(0)
b = tree.add_node(0)
tree.add_node(a)
louds = LoudsTree(tree)
louds.children_count(louds.root())   # 2
```

```python
from compactmeta.seqio import read_fastx

with open("reads.fq") as handle:
    for record in read_fastx(handle):
        print(record.name, len(record.seq))
```

```python
from compactmeta.assignments import parse_classification

with open("classification.tsv") as handle:
    assignments = parse_classification(handle, min_score=0, min_hit_length=0)
```

`estimate_abundance(assignments, tree, lengths)` expects the assignment
targets to be node ids of `tree`, with one genome length per node. It returns
two lists: the abundance of every node and its read count. The abundance
values are cumulative over subtrees, so the root holds 1.

## What it does not do

- It has no command-line program.
- It does not build or load a classification index.
- It does not classify reads.
- It does not load taxonomy or name tables. The tax IDs that
  `parse_classification` returns have to be mapped to `PlainTree` node ids by
  the caller.
- `OutputFormat` only names the report layouts. The package does not write
  abundance reports.
- Data structures live in memory only; they cannot be saved to or loaded from
  files.