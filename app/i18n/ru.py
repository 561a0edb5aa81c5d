# -*- coding: utf-8 -*-
"""Russian (ru) strings of the feedback page."""

LANG = {
    "page.title": "Обратная связь IFET",
    "page.subtitle": "Расскажите, что работает, а что нет.",
    "form.type_label": "О чём сообщение?",
    "form.type_bug": "Ошибка",
    "form.type_idea": "Идея",
    "form.type_other": "Другое",
    "form.email_label": "Email (необязательно)",
    "form.email_placeholder": "you@example.com",
    "form.message_label": "Сообщение",
    "form.message_placeholder": "Опишите проблему или идею...",
    "form.attachment_label": "Прикрепить файл (необязательно)",
    "form.submit": "Отправить",
    "status.sending": "Отправка...",
    "status.sent": "Спасибо! Ваш отзыв отправлен.",
    "status.failed": "Не удалось отправить отзыв. Попробуйте позже.",
    "footer.privacy": "Политика конфиденциальности",
    "footer.back": "Вернуться в приложение",
}
