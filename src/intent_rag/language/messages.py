"""Localized response strings."""

from intent_rag.models.types import SupportedLanguage

MESSAGES: dict[str, dict[str, str]] = {
    "empty_input": {
        "zh": "请输入您的问题或指令。",
        "en": "Please enter your question or command.",
        "ja": "質問またはコマンドを入力してください。",
        "ko": "질문이나 명령을 입력하세요.",
        "es": "Por favor ingrese su pregunta o comando.",
        "fr": "Veuillez entrer votre question ou commande.",
        "de": "Bitte geben Sie Ihre Frage oder Ihren Befehl ein.",
    },
    "not_understood": {
        "zh": '抱歉，我没有理解您的问题。请输入 "帮助" 查看可用功能。',
        "en": 'Sorry, I did not understand your request. Type "help" to see available features.',
        "ja": "申し訳ありませんが、理解できませんでした。「ヘルプ」と入力すると利用可能な機能が表示されます。",
        "ko": '죄송합니다. 요청을 이해하지 못했습니다. "도움말"을 입력하여 사용 가능한 기능을 확인하세요.',
        "es": 'Lo siento, no entendí su solicitud. Escriba "ayuda" para ver las funciones disponibles.',
        "fr": "Désolé, je n'ai pas compris votre demande. Tapez « aide » pour voir les fonctions disponibles.",
        "de": 'Entschuldigung, ich habe Ihre Anfrage nicht verstanden. Geben Sie "Hilfe" ein, um die verfügbaren Funktionen zu sehen.',
    },
    "fuzzy_suggestion": {
        "zh": '我不太确定您的意思。您是否想要 "{text}"({score:.4f})？\n请输入 "帮助" 查看所有可用功能。',
        "en": 'I am not sure what you mean. Did you mean "{text}"({score:.4f})?\nType "help" to see all available features.',
        "ja": "意味がよくわかりません。「{text}」({score:.4f}) のことですか？\n「ヘルプ」と入力するとすべての機能が表示されます。",
        "ko": '무슨 뜻인지 잘 모르겠습니다. "{text}"({score:.4f})을(를) 원하셨나요?\n"도움말"을 입력하여 모든 기능을 확인하세요.',
        "es": 'No estoy seguro de lo que quiere decir. ¿Quiso decir "{text}"({score:.4f})?\nEscriba "ayuda" para ver todas las funciones.',
        "fr": "Je ne suis pas sûr de comprendre. Vouliez-vous dire « {text} »({score:.4f}) ?\nTapez « aide » pour voir toutes les fonctions.",
        "de": 'Ich bin nicht sicher, was Sie meinen. Meinten Sie "{text}"({score:.4f})?\nGeben Sie "Hilfe" ein, um alle Funktionen zu sehen.',
    },
    "query_error": {
        "zh": "处理查询时发生错误: {error}",
        "en": "Error processing query: {error}",
        "ja": "クエリ処理中にエラーが発生しました: {error}",
        "ko": "쿼리 처리 중 오류 발생: {error}",
        "es": "Error al procesar la consulta: {error}",
        "fr": "Erreur lors du traitement de la requête: {error}",
        "de": "Fehler bei der Verarbeitung der Anfrage: {error}",
    },
    "not_implemented": {
        "zh": '功能 "{action}" 暂未实现。',
        "en": 'Action "{action}" is not implemented yet.',
        "ja": "機能「{action}」はまだ実装されていません。",
        "ko": '기능 "{action}"은(는) 아직 구현되지 않았습니다.',
        "es": 'La acción "{action}" aún no está implementada.',
        "fr": "L'action « {action} » n'est pas encore implémentée.",
        "de": 'Die Aktion "{action}" ist noch nicht implementiert.',
    },
    "action_error": {
        "zh": "执行操作时发生错误: {error}",
        "en": "Error executing action: {error}",
        "ja": "操作の実行中にエラーが発生しました: {error}",
        "ko": "작업 실행 중 오류 발생: {error}",
        "es": "Error al ejecutar la acción: {error}",
        "fr": "Erreur lors de l'exécution de l'action: {error}",
        "de": "Fehler beim Ausführen der Aktion: {error}",
    },
    "missing_parameter": {
        "zh": "请指定 {parameter}。",
        "en": "Please specify a {parameter}.",
        "ja": "{parameter} を指定してください。",
        "ko": "{parameter}을(를) 지정하세요.",
        "es": "Por favor especifique {parameter}.",
        "fr": "Veuillez préciser {parameter}.",
        "de": "Bitte geben Sie {parameter} an.",
    },
    "missing_parameter.deviceName": {
        "zh": '请指定设备名称。例如: "添加设备 iPhone-16"',
        "en": 'Please specify a device name. For example: "add device iPhone-16"',
        "ja": "デバイス名を指定してください。例: 「デバイス追加 iPhone-16」",
        "ko": '장치 이름을 지정하세요. 예: "장치 추가 iPhone-16"',
        "es": 'Por favor especifique un nombre de dispositivo. Por ejemplo: "agregar dispositivo iPhone-16"',
        "fr": "Veuillez préciser un nom d'appareil. Par exemple : « ajouter appareil iPhone-16 »",
        "de": 'Bitte geben Sie einen Gerätenamen an. Zum Beispiel: "Gerät hinzufügen iPhone-16"',
    },
}


def get_message(key: str, language: str | SupportedLanguage = "en", **kwargs) -> str:
    """Look up a localized message.

    Args:
        key: Message key
        language: Language code; unknown languages fall back to English
        **kwargs: Format arguments

    Returns:
        Formatted message text

    Raises:
        KeyError: If the message key does not exist
    """
    if isinstance(language, SupportedLanguage):
        language = language.value
    variants = MESSAGES[key]
    template = variants.get(language) or variants["en"]
    return template.format(**kwargs) if kwargs else template


def has_message(key: str) -> bool:
    """Whether a message key exists."""
    return key in MESSAGES
