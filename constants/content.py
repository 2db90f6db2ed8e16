"""Copy, options and accepted values shared by the schema and the widgets."""

from __future__ import annotations

from typing import Final

DEFAULT_ACADEMY_NAME: Final[str] = "أكاديمية تحفيظ القرآن الكريم أونلاين"
ROLE_TITLE: Final[str] = "نموذج تقديم مشرفات خدمة العملاء"
WELCOME_TAGLINE: Final[str] = "فرصة عمل عن بُعد"
FORM_TITLE: Final[str] = "تقديم مشرفات خدمة العملاء"

BASIC_CONDITIONS: Final[tuple[str, ...]] = (
    "الراتب 2300 جنيه وزيادة لـ 2600 جنيه بعد شهرين.",
    "عمل الإشراف يوميًا ولا يوجد إجازة أسبوعية.",
    "التواجد على مدار اليوم للرد على الرسائل ومتابعة دخول الحلقات.",
    "القدرة على التعامل مع ZOOM و Google Meet.",
    "توفر إنترنت مستقر على مدار اليوم.",
    "حضور الحصص التجريبية للمعلمين والمعلمات لتقييم الحلقات.",
    "عدم التوقف قبل 6 أشهر من بدء العمل.",
)

NO_STOPPING_POLICY: Final[str] = (
    "تمنع الأكاديمية التوقف قبل 6 أشهر من بدء العمل وتمنع التوقف المفاجئ دون إبلاغ مسبق، "
    "حرصًا على استقرار الحلقات والطلاب."
)

# Accepted values
AGREE: Final[str] = "موافقة"
DISAGREE: Final[str] = "غير موافقة"
YES: Final[str] = "نعم"
NO: Final[str] = "لا"
FULL_DAY_AVAILABLE: Final[str] = "متفرغة وأستطيع التواجد والعمل على مدار اليوم"
NOT_FULL_DAY_AVAILABLE: Final[str] = "لا أستطيع ذلك"

AGREEMENT_OPTIONS: Final[tuple[str, ...]] = (AGREE, DISAGREE)
YES_NO_OPTIONS: Final[tuple[str, ...]] = (YES, NO)
AVAILABILITY_OPTIONS: Final[tuple[str, ...]] = (FULL_DAY_AVAILABLE, NOT_FULL_DAY_AVAILABLE)
MARITAL_STATUS_OPTIONS: Final[tuple[str, ...]] = (
    "عزباء",
    "مخطوبة",
    "متزوجة",
    "متزوجة وحامل",
    "أرملة",
    "مطلقة",
)
INTERNET_OPTIONS: Final[tuple[str, ...]] = (
    "واي فاي منزلي (Wi-Fi)",
    "باقة بيانات (Data)",
    "كلاهما",
)

# Labels used inside validation messages
FIELD_LABELS: Final[dict[str, str]] = {
    "agree_all_conditions": "الموافقة على الشروط",
    "salary_acceptance": "الراتب",
    "daily_work_no_weekly_off": "العمل يوميًا",
    "all_day_availability": "التواجد طوال اليوم",
    "can_use_tools": "ZOOM + Google Meet",
    "agree_no_stopping_policy": "شرط عدم التوقف قبل 6 أشهر",
    "full_name_3": "الاسم الثلاثي",
    "age": "السن",
    "marital_status": "الحالة الاجتماعية",
    "whatsapp_number": "رقم الواتساب",
    "education": "المؤهل العلمي",
    "finished_study": "هل أنهيتِ الدراسة؟",
    "supervision_experience_details": "هل تم العمل قبل ذلك في الإشراف وما هي المهام التي كنتِ تقومين بها؟",
    "current_job_and_hours": "الوظيفة الحالية وأوقات العمل",
    "previous_jobs": "الوظائف السابقة",
    "agree_attend_trial_sessions": "حضور الحصص التجريبية",
    "internet_stability": "الإنترنت المستقر",
    "why_choose_you": "ما الذي يُميزك عن غيرك لنختارك للعمل معنا؟",
    "supervision_role_idea": "ما هي فكرتك عن عمل الإشراف أو عن مهامه؟",
    "convince_parent_message": "رسالة لإقناع والدة بتجربة حلقة أونلاين",
}

# Question text shown above each widget
QUESTIONS: Final[dict[str, str]] = {
    "agree_all_conditions": "1) هل توافق على جميع الشروط المذكورة أعلاه؟",
    "salary_acceptance": "2) الراتب 2300 جنيه وزيادة لـ 2600 جنيه بعد شهرين",
    "daily_work_no_weekly_off": "3) عمل الإشراف يوميًا (لا يوجد إجازة أسبوعية)",
    "all_day_availability": "4) يشترط التواجد على مدار اليوم للرد على الرسائل ومتابعة دخول الحلقات",
    "can_use_tools": "5) هل تستطيعين التعامل مع ZOOM + Google meet ؟",
    "agree_no_stopping_policy": "6) شرط عدم التوقف قبل 6 أشهر من بدء العمل",
    "full_name_3": "1) الاسم ثلاثي",
    "age": "2) السن",
    "marital_status": "3) الحالة الاجتماعية",
    "whatsapp_number": "4) رقم واتساب بالإنجليزي",
    "education": "5) المؤهل العلمي",
    "finished_study": "6) هل أنهيتِ الدراسة؟",
    "supervision_experience_details": "1) هل تم العمل قبل ذلك في الإشراف؟ وما هي المهام التي كنتِ تقومين بها؟",
    "current_job_and_hours": "2) الوظيفة الحالية لكِ وأوقات العمل فيها",
    "previous_jobs": "3) الوظائف السابقة لكِ",
    "agree_attend_trial_sessions": "4) يشترط حضور الحصص التجريبية للمعلمين والمعلمات لتقييم الحلقات",
    "internet_stability": "5) هل متوفر إنترنت مستقر (واي فاي) على مدار اليوم؟",
    "why_choose_you": "5) ما الذي يُميزك عن غيرك لنختارك للعمل معنا؟",
    "supervision_role_idea": "6) ما هي فكرتك عن عمل الإشراف أو عن مهامه؟",
    "convince_parent_message": (
        "7) والدة لا تريد أن تعطي لابنها تحفيظ أونلاين لأنه لن يكون الأفضل له الأونلاين لصغر سنه. "
        "اكتبي رسالة لإقناعها بأن تجرب معنا حلقة أونلاين"
    ),
}

CONVINCE_PARENT_NOTES: Final[tuple[str, ...]] = (
    "هذا السؤال مهم في التمييز بين المتقدمات.",
    "(الرد بالفصحى فقط وليس بالعامية) • (تجنبي الأخطاء الإملائية)",
)

AGE_HINT: Final[str] = "اكتبيه بالأرقام الإنجليزية فقط (مثال: 25)."
WHATSAPP_HINT: Final[str] = "مثال: +201234567890"
AGREEMENT_CHECKBOX_LABEL: Final[str] = "أوافق على هذه السياسة:"
AGREEMENT_CHECKBOX_REPEAT_LABEL: Final[str] = "أوافق على هذا الشرط:"
POLICY_TITLE: Final[str] = "سياسة الأكاديمية"
BLOCKED_TITLE: Final[str] = "تنبيه مهم"
NOTICE_TITLE: Final[str] = "تنبيه لطيف"

# Page-level messages
SUBMIT_REJECTED_FALLBACK: Final[str] = "تعذر الإرسال الآن. جرّبي مرة أخرى بعد قليل."
CONNECTION_ERROR_MESSAGE: Final[str] = "حدث خطأ في الاتصال. تأكدي من الإنترنت ثم أعيدي المحاولة."
STEP_BLOCKED_HINT: Final[str] = "من فضلك راجعي الحقول المُعلَّمة قبل المتابعة."

# Button labels
PREVIOUS_LABEL: Final[str] = "السابق"
NEXT_LABEL: Final[str] = "التالي"
SUBMIT_LABEL: Final[str] = "إرسال الطلب"
SUBMITTING_LABEL: Final[str] = "جارٍ الإرسال..."
DISMISS_LABEL: Final[str] = "إخفاء"
NEW_APPLICATION_LABEL: Final[str] = "تقديم طلب جديد"

SUCCESS_TITLE: Final[str] = "تم استلام طلبك بنجاح"
SUCCESS_BODY: Final[str] = "شكرًا لاهتمامك بالعمل معنا. سنراجع الطلب ونتواصل معكِ عبر واتساب في حال القبول المبدئي."
