"""
헤지 계산 오류 정의

모든 산술 오류는 검출 즉시 호출자에게 전파됩니다. 부분 결과는 없습니다.
ValueError를 상속하지 않으므로 pydantic 검증 단계에서도 감싸지지 않고 그대로 전파됩니다.
"""


class HedgeMathError(ArithmeticError):
    """헤지 코어의 모든 산술 오류의 기반 클래스"""


class DivisionByZero(HedgeMathError, ZeroDivisionError):
    """분모가 0"""


class Overflow(HedgeMathError, OverflowError):
    """결과 또는 피연산자가 표현 가능한 정수 폭을 초과"""


class InvalidRange(HedgeMathError):
    """sqrt_price_lower >= sqrt_price_upper 인 가격 범위"""

    def __init__(self, sqrt_price_lower: int, sqrt_price_upper: int):
        self.sqrt_price_lower = sqrt_price_lower
        self.sqrt_price_upper = sqrt_price_upper
        super().__init__(
            f"잘못된 가격 범위: lower={sqrt_price_lower} >= upper={sqrt_price_upper}"
        )
