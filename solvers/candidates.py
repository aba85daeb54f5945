"""
Candidate sets as 9-bit masks.
bit (v - 1) 가 켜져 있으면 값 v 가 아직 후보라는 뜻.
"""

VALUES = list(range(1, 10))
ALL_MASK = (1 << 9) - 1  # 0b1_1111_1111


def value_to_mask(value):
    if value not in VALUES:
        raise ValueError(f"{value} is not a sudoku value")
    return 1 << (value - 1)


def values_to_mask(values):
    mask = 0
    for v in values:
        mask |= value_to_mask(v)
    return mask


def mask_to_values(mask):
    return [v for v in VALUES if mask & (1 << (v - 1))]


def mask_size(mask):
    return bin(int(mask)).count("1")


def mask_value(mask):
    """싱글톤 마스크의 값 반환 (싱글톤이 아니면 0)"""
    mask = int(mask)
    if mask_size(mask) != 1:
        return 0
    return mask.bit_length()
