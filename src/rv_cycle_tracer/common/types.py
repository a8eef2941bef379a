"""
共通の型定義を提供するモジュール。
プロジェクト全体で使用される汎用的な型エイリアスなどを定義します。
"""
from typing import Dict, List, NamedTuple

# @intent:data_structure レジスタ名と値を対応させる辞書の型エイリアス。
# CPU, Runner, UIなど複数のレイヤーで共通して使用されます。
RegisterMap = Dict[str, int]

# @intent:data_structure 単一のレジスタの表示定義。UIが動的にフィールドを生成するために使用される。
class RegisterInfo(NamedTuple):
    name: str
    width: int  # ビット幅 (32)

# @intent:data_structure レジスタグループの表示定義。ABI上の役割（例: "Temporaries"）でまとめる。
class RegisterLayoutInfo(NamedTuple):
    group_name: str
    registers: List[RegisterInfo]
