"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidInputError(DomainException):
    """A balance, payment, rate or horizon is outside its allowed range"""

    pass


class NonConvergentPaymentError(DomainException):
    """Monthly payment does not exceed the first month's interest, so the debt never amortizes"""

    def __init__(self, balance: float, monthly_rate: float, monthly_payment: float):
        self.balance = balance
        self.monthly_rate = monthly_rate
        self.monthly_payment = monthly_payment
        self.first_month_interest = balance * monthly_rate
        super().__init__(
            f"Payment {monthly_payment:.2f} does not exceed first month interest "
            f"{self.first_month_interest:.2f}"
        )


class NoDebtsError(DomainException):
    """Debt strategy requested with no debt accounts"""

    pass
