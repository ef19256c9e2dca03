from typing import Optional

DEFAULT_NAME = "World"

class GreetingService:
    """Builds greeting messages"""

    def normalize(self, name: Optional[str]) -> str:
        """
        Trim the name, falling back to World when it is absent or blank
        """
        if name is None or not name.strip():
            return DEFAULT_NAME
        return name.strip()

    def greet(self, name: Optional[str]) -> str:
        return f"Hello, {self.normalize(name)}!"

class ArithmeticService:
    """Integer arithmetic with signed 32-bit wraparound"""

    def add(self, a: int, b: int) -> int:
        return (a + b + 2 ** 31) % 2 ** 32 - 2 ** 31

greeting_service = GreetingService()
arithmetic_service = ArithmeticService()
