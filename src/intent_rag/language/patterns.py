"""Language detection patterns.

Each language has a fixed, ordered list of compiled patterns: character-class
ranges for scripts that have them, plus keyword sets for the vocabulary the
catalog uses. Scores are match counts, so script ranges dominate keyword hits
for CJK and Hangul input.
"""

import re

from intent_rag.models.types import SupportedLanguage

_FLAGS = re.IGNORECASE | re.UNICODE

LANGUAGE_PATTERNS: dict[SupportedLanguage, tuple[re.Pattern[str], ...]] = {
    SupportedLanguage.ZH: (
        re.compile(r"[\u4e00-\u9fff]"),
        re.compile(r"[\uff0c\u3002\uff01\uff1f\uff1b\uff1a\u201c\u201d\u2018\u2019]"),
        re.compile(r"(?:查询|我的|设备|用户|积分|状态|在线|添加|删除|帮助|退出)", _FLAGS),
    ),
    SupportedLanguage.EN: (
        re.compile(r"\b(?:check|my|device|user|points|status|online|add|remove|help|exit|query|show|list)\b", _FLAGS),
        re.compile(r"\b(?:what|how|where|when|why|which|who)\b", _FLAGS),
        re.compile(
            r"\b(?:is|are|am|was|were|have|has|had|do|does|did|will|would|can|could|should|may|might)\b",
            _FLAGS,
        ),
    ),
    SupportedLanguage.JA: (
        re.compile(r"[\u3040-\u309f\u30a0-\u30ff\u4e00-\u9faf]"),
        re.compile(r"(?:確認|私|デバイス|ユーザー|ポイント|状態|オンライン|追加|削除|ヘルプ|終了)", _FLAGS),
    ),
    SupportedLanguage.KO: (
        re.compile(r"[\uac00-\ud7af]"),
        re.compile(r"(?:확인|내|장치|사용자|포인트|상태|온라인|추가|제거|도움말|종료)", _FLAGS),
    ),
    SupportedLanguage.ES: (
        re.compile(
            r"\b(?:verificar|mi|dispositivo|usuario|puntos|estado|en línea|agregar|eliminar|ayuda|salir)\b",
            _FLAGS,
        ),
        re.compile(r"\b(?:qué|cómo|dónde|cuándo|por qué|cuál|quién)\b", _FLAGS),
    ),
    SupportedLanguage.FR: (
        re.compile(
            r"\b(?:vérifier|mon|ma|mes|appareil|utilisateur|points|état|en ligne|ajouter|supprimer|aide|sortir)\b",
            _FLAGS,
        ),
        re.compile(r"\b(?:que|comment|où|quand|pourquoi|quel|qui)\b", _FLAGS),
    ),
    SupportedLanguage.DE: (
        re.compile(
            r"\b(?:prüfen|mein|meine|gerät|benutzer|punkte|status|online|hinzufügen|entfernen|hilfe|beenden)\b",
            _FLAGS,
        ),
        re.compile(r"\b(?:was|wie|wo|wann|warum|welche|wer)\b", _FLAGS),
    ),
}
