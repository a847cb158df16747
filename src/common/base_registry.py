"""
共通レジストリ基底クラス
テーマプロファイル（face.theme）とロゴ字形（glyphs.registry）で共有する名前付き登録簿。
"""

import re
from typing import Any, Callable, Iterator


class BaseRegistry:
    """名前 → オブジェクトの登録簿。

    - 文字列キーは正規化されます（大文字小文字・キャメル→スネーク・ハイフンを吸収）。
    - 同名で別オブジェクトを登録しようとすると `ValueError`。
    - 未登録名の取得は `KeyError`。
    """

    def __init__(self, kind: str = "item"):
        self._kind = kind
        self._registry: dict[str, Any] = {}

    # === 内部ユーティリティ ===
    @staticmethod
    def _camel_to_snake(name: str) -> str:
        s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", name)
        s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
        return s2.lower()

    @classmethod
    def normalize_key(cls, name: str) -> str:
        """レジストリキーの正規化（例: "SubmarinerNoDate" -> "submariner_no_date"）。"""
        if not isinstance(name, str):
            raise TypeError("レジストリキーは str である必要があります")
        name = name.strip().replace("-", "_")
        if not name:
            raise ValueError("レジストリキーは空であってはなりません")
        return cls._camel_to_snake(name) if any(c.isupper() for c in name) else name.lower()

    def add(self, name: str, obj: Any) -> Any:
        """`obj` を `name` で登録して返す。"""
        key = self.normalize_key(name)
        if key in self._registry and self._registry[key] is not obj:
            raise ValueError(f"{self._kind} '{key}' は既に登録されています")
        self._registry[key] = obj
        return obj

    def register(self, name: str | None = None) -> Callable[[Any], Any]:
        """関数/クラスを登録するデコレータ（名前省略時は `__name__`）。"""

        def decorator(obj: Any) -> Any:
            return self.add(name or obj.__name__, obj)

        return decorator

    def get(self, name: str) -> Any:
        key = self.normalize_key(name)
        if key not in self._registry:
            raise KeyError(f"{self._kind} '{name}' は登録されていません")
        return self._registry[key]

    def list_all(self) -> list[str]:
        """登録順の名前一覧。"""
        return list(self._registry.keys())

    def is_registered(self, name: str) -> bool:
        return self.normalize_key(name) in self._registry

    def unregister(self, name: str) -> None:
        """レジストリから削除（名前が存在しない場合は無視）。"""
        self._registry.pop(self.normalize_key(name), None)

    def __iter__(self) -> Iterator[str]:
        return iter(self.list_all())

    def __len__(self) -> int:
        return len(self._registry)
