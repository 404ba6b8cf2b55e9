"""원점수 → 0~20 척도 정규화"""

import math

# 0~20 척도는 고정 (설정값 아님)
GRADE_SCALE = 20


class InvalidScore(ValueError):
    """정규화할 수 없는 점수 (NaN / 무한대 등)"""


class InvalidMaximum(InvalidScore):
    """만점이 0 이하인 점수 (정규화 불가)"""

    def __init__(self, max_value):
        self.max_value = max_value
        super().__init__(f"max_value must be positive, got {max_value!r}")


def normalize_score(value: float, max_value: float) -> float:
    # 만점 초과 점수는 자르지 않음 (입력 검증은 상위 책임)
    if max_value is None or max_value <= 0:
        raise InvalidMaximum(max_value)
    if not (math.isfinite(value) and math.isfinite(max_value)):
        raise InvalidScore(f"score must be finite, got {value!r}/{max_value!r}")
    return value / max_value * GRADE_SCALE
