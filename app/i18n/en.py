# -*- coding: utf-8 -*-
"""English (en) strings of the feedback page. Fallback language."""

LANG = {
    "page.title": "IFET Feedback",
    "page.subtitle": "Tell us what works and what does not.",
    "form.type_label": "What is it about?",
    "form.type_bug": "Bug report",
    "form.type_idea": "Idea",
    "form.type_other": "Other",
    "form.email_label": "Email (optional)",
    "form.email_placeholder": "you@example.com",
    "form.message_label": "Message",
    "form.message_placeholder": "Describe the problem or idea...",
    "form.attachment_label": "Attach a file (optional)",
    "form.submit": "Send",
    "status.sending": "Sending...",
    "status.sent": "Thank you! Your feedback has been sent.",
    "status.failed": "Could not send feedback. Please try again later.",
    "footer.privacy": "Privacy policy",
    "footer.back": "Back to the app",
}
