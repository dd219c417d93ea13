from typing import List, Optional

from tqdm.auto import tqdm

from src.combinatorics.back_and_forth import BackAndForthIterator
from src.combinatorics.cursor import CombinationCursor
from src.combinatorics.cursor_conf import CursorConfig

BASE = "abcd"
START_LENGTH = 1
END_LENGTH: Optional[int] = None  # None -> all arities when starting at 1
SHOW_PROGRESS = True
VERBOSE = False
PREVIEW = 20


def enumerate_forward(
        cursor: BackAndForthIterator[str],
        progress: bool = True,
        total: Optional[int] = None,
) -> List[str]:
    out: List[str] = []
    with tqdm(total=total, desc="Forward", unit="comb", disable=not progress) as bar:
        while cursor.has_next():
            out.append(cursor.next())
            bar.update(1)
    return out


def enumerate_backward(cursor: BackAndForthIterator[str], progress: bool = True) -> List[str]:
    out: List[str] = []
    with tqdm(desc="Backward", unit="comb", disable=not progress) as bar:
        while cursor.has_previous():
            out.append(cursor.previous())
            bar.update(1)
    return out


def main(cfg: Optional[CursorConfig] = None, progress: bool = SHOW_PROGRESS) -> List[str]:
    if cfg is None:
        cfg = CursorConfig(base=BASE, start_length=START_LENGTH, end_length=END_LENGTH, verbose=VERBOSE)
    cfg.validate()
    print(f"[CFG] base={cfg.base!r}  start={cfg.start_length}  end={cfg.resolved_end_length()}")

    cursor = CombinationCursor.from_config(cfg)
    print(f"[CFG] {cursor}  total={cursor.remaining()}")

    forward = enumerate_forward(cursor, progress=progress, total=cursor.remaining())
    preview = ", ".join(forward[:PREVIEW])
    more = " ..." if len(forward) > PREVIEW else ""
    print(f"[Forward] {len(forward)} combinations: {preview}{more}")

    backward = enumerate_backward(cursor, progress=progress)
    if backward != forward[::-1]:
        raise RuntimeError("backward replay does not mirror the forward traversal")
    print(f"[Backward] replay OK ({len(backward)} steps) → {cursor}")
    return forward


if __name__ == "__main__":
    main()
