# autocenter/models/messages.py
from autocenter.models.common import normalize_language

MESSAGES = {
    "ar": {
        "centerName": "مركز أبو المجد الهندسي",
        "tagline": "صيانة احترافية لسيارتك في عطبرة",
        "noBookingFound": "لم يتم العثور على طلب بهذا الرقم",
        "loginError": "البريد الإلكتروني أو كلمة المرور غير صحيحة",
        "operationFailed": "تعذر تنفيذ العملية، حاول مرة أخرى",
        "confirmDelete": "يجب تأكيد الحذف قبل التنفيذ",
        "waBooking": (
            "مرحباً {name} 👋\n"
            "تم تأكيد حجزك في مركز أبو المجد الهندسي ✅\n"
            "رقم الحجز: {booking_id}\n"
            "السيارة: {vehicle}\n"
            "الخدمة: {service}\n"
            "الموعد: {time}\n"
            "يمكنك تتبع حالة سيارتك باستخدام رقم الحجز."
        ),
        "waStatusUpdate": (
            "مرحباً {name} 👋\n"
            "تحديث حالة سيارتك ({vehicle}):\n"
            "من: {from_label}\n"
            "إلى: {to_label}\n"
            "شكراً لثقتك في مركز أبو المجد الهندسي."
        ),
        "waCarReady": (
            "مرحباً {name} 🎉\n"
            "سيارتك ({vehicle}) {to_label}.\n"
            "الحالة السابقة: {from_label}\n"
            "نتشرف بزيارتك لاستلامها."
        ),
    },
    "en": {
        "centerName": "Abu Almagd Engineering Center",
        "tagline": "Professional car care in Atbara",
        "noBookingFound": "No booking found with this ID",
        "loginError": "Incorrect email or password",
        "operationFailed": "Operation failed, please try again",
        "confirmDelete": "Deletion must be confirmed before it runs",
        "waBooking": (
            "Hello {name} 👋\n"
            "Your booking at Abu Almagd Engineering Center is confirmed ✅\n"
            "Booking ID: {booking_id}\n"
            "Vehicle: {vehicle}\n"
            "Service: {service}\n"
            "Appointment: {time}\n"
            "Use your booking ID to track your car."
        ),
        "waStatusUpdate": (
            "Hello {name} 👋\n"
            "Status update for your {vehicle}:\n"
            "From: {from_label}\n"
            "To: {to_label}\n"
            "Thank you for trusting Abu Almagd Engineering Center."
        ),
        "waCarReady": (
            "Hello {name} 🎉\n"
            "Your {vehicle} is now: {to_label}.\n"
            "Previous status: {from_label}\n"
            "We look forward to seeing you at pickup."
        ),
    },
}


def translate(key: str, lang: str | None) -> str:
    """Unknown keys come back unchanged."""
    return MESSAGES[normalize_language(lang)].get(key, key)
