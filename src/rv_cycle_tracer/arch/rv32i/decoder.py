# src/rv_cycle_tracer/arch/rv32i/decoder.py
"""
テキスト形式の命令をInstructionレコードへ変換するデコーダ。

入力はトリム、小文字化、カンマ除去の後に空白で分割されます。
最初のトークンがニーモニック、残りがオペランドです。
"""
import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from rv_cycle_tracer.arch.rv32i.isa import InstructionClass, Mnemonic, lookup_mnemonic

REGISTER_PREFIX = "x"

_REGISTER_RE = re.compile(rf"^{REGISTER_PREFIX}(\d+)$")
_IMMEDIATE_RE = re.compile(r"^[+-]?\d+$")
# offset(base) 形式。例: "8(x6)"
_BASE_OFFSET_RE = re.compile(rf"^([+-]?\d+)?\(({REGISTER_PREFIX}\d+)\)$")

# @intent:responsibility デコード済みの命令を不変に記録します。
@dataclass(frozen=True)
class Instruction:
    """
    デコードされた命令。オペランドはレジスタ番号または即値の整数列です。
    """
    text: str
    name: str
    mnemonic: Mnemonic
    operands: Tuple[int, ...] = field(default_factory=tuple)

    @property
    def instruction_class(self) -> InstructionClass:
        return self.mnemonic.instruction_class

    @property
    def opcode(self) -> int:
        return self.mnemonic.opcode

    @property
    def funct3(self) -> int:
        return self.mnemonic.funct3

    @property
    def funct7(self) -> int:
        return self.mnemonic.funct7

    @property
    def is_known(self) -> bool:
        return self.mnemonic is not Mnemonic.UNKNOWN

    # @intent:responsibility 指定位置のオペランドを返します。省略されている場合はdefaultを返します。
    def operand(self, index: int, default: Optional[int] = None) -> Optional[int]:
        if index < len(self.operands):
            return self.operands[index]
        return default

# @intent:responsibility 1つのオペランドトークンを整数列に変換します。解析できない場合はNoneを返します。
def _parse_operand(token: str) -> Optional[List[int]]:
    match = _REGISTER_RE.match(token)
    if match:
        return [int(match.group(1))]
    if _IMMEDIATE_RE.match(token):
        return [int(token)]
    match = _BASE_OFFSET_RE.match(token)
    if match:
        # offset(xN) はベースレジスタ、オフセットの順に展開する
        offset = int(match.group(1)) if match.group(1) else 0
        return [int(match.group(2)[len(REGISTER_PREFIX):]), offset]
    return None

def _tokenize(text: str) -> List[str]:
    return text.strip().lower().replace(",", " ").split()

# @intent:responsibility 命令テキストをデコードします。
# @intent:rationale 不正な入力は例外にせず、UNKNOWN命令としてPCだけを進める寛容な方針を採ります。
def decode(text: str) -> Instruction:
    """
    命令テキストをInstructionに変換します。

    未知のニーモニック、解析できないオペランド、必要数に満たないオペランドは
    全てMnemonic.UNKNOWNとしてデコードされます。レジスタ番号の範囲は検証しません。
    """
    tokens = _tokenize(text)
    if not tokens:
        return Instruction(text=text, name="", mnemonic=Mnemonic.UNKNOWN)

    name = tokens[0]
    mnemonic = lookup_mnemonic(name)

    operands: List[int] = []
    for token in tokens[1:]:
        parsed = _parse_operand(token)
        if parsed is None:
            return Instruction(text=text, name=name, mnemonic=Mnemonic.UNKNOWN)
        operands.extend(parsed)

    if len(operands) < mnemonic.instruction_class.min_operands:
        mnemonic = Mnemonic.UNKNOWN

    return Instruction(text=text, name=name, mnemonic=mnemonic, operands=tuple(operands))

# @intent:responsibility デコード済み命令を正規化されたテキストに整形します。
def format_instruction(instruction: Instruction) -> str:
    """
    例: "ADD x3, x1, x2", "LW x7, 8(x6)", "BEQ x1, x2, 2"
    """
    if not instruction.is_known:
        return instruction.text.strip()

    name = instruction.mnemonic.name
    ops = instruction.operands
    cls = instruction.instruction_class

    if cls is InstructionClass.R:
        return f"{name} x{ops[0]}, x{ops[1]}, x{ops[2]}"
    if cls is InstructionClass.I:
        return f"{name} x{ops[0]}, x{ops[1]}, {ops[2]}"
    if cls in (InstructionClass.LOAD, InstructionClass.STORE):
        offset = instruction.operand(2, 0)
        return f"{name} x{ops[0]}, {offset}(x{ops[1]})"
    # Branch
    parts = [f"x{ops[0]}", f"x{ops[1]}"]
    if len(ops) > 2:
        parts.append(str(ops[2]))
    return f"{name} " + ", ".join(parts)
