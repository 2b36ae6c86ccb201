from rna_nussinov_fold.folding.nussinov.nussinov_back_pointer import NussinovBacktrackOp, NussinovBackPointer
from rna_nussinov_fold.folding.nussinov.nussinov_fold_state import NussinovFoldState, make_fold_state

__all__ = [
    "NussinovBacktrackOp",
    "NussinovBackPointer",
    "NussinovFoldState",
    "make_fold_state",
]
