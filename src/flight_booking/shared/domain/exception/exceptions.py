class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ValidationException(DomainException):
    """入力値の検証エラー（フィールド単位のメッセージを集約する）"""

    def __init__(self, errors: list[str], message: str = "Validation Error") -> None:
        super().__init__(message)
        self.message = message
        self.errors = errors


class ResourceNotFoundException(DomainException):
    """参照先のリソースが見つからない場合"""

    pass


class MissingReferenceException(DomainException):
    """参照IDがリクエストに含まれていない場合"""

    pass


class InvalidIdentifierException(DomainException):
    """IDの形式が不正な場合"""

    def __init__(self, field: str, value: str) -> None:
        super().__init__(f"Invalid format for {field} ID.")
        self.field = field
        self.value = value


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（一意制約を満たさない書き込み）"""

    pass


class StoreException(DomainException):
    """永続化層での想定外のエラー"""

    pass


class ConfigurationException(DomainException):
    """起動時の設定不備"""

    pass
