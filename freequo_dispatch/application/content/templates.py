"""Application confirmation email templates.

``string.Template`` placeholders; every substituted value is escaped by the
ContentBuilder before it reaches the HTML template.
"""

from string import Template

APPLICATION_CONFIRMATION_SUBJECT = Template("✓ Application Confirmed: $job_title")

APPLICATION_CONFIRMATION_HTML = Template("""\
<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <style>
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Arial, sans-serif;
            line-height: 1.6;
            color: #333;
            max-width: 600px;
            margin: 0 auto;
            padding: 20px;
            background-color: #f5f5f5;
        }
        .email-container { background: white; border-radius: 12px; padding: 40px; }
        .header { text-align: center; margin-bottom: 30px; }
        .logo {
            width: 60px; height: 60px; border-radius: 12px;
            background: linear-gradient(135deg, #6366f1, #10b981);
            color: white; font-size: 24px; font-weight: bold;
            display: inline-flex; align-items: center; justify-content: center;
        }
        h1 { color: #1f2937; font-size: 24px; margin: 0 0 10px 0; }
        .success-badge {
            display: inline-block; background: #d1fae5; color: #065f46;
            padding: 8px 16px; border-radius: 20px; font-size: 14px; font-weight: 600;
        }
        .greeting { font-size: 16px; color: #4b5563; margin-bottom: 20px; }
        .message {
            background: linear-gradient(135deg, #6366f1, #10b981); color: white;
            padding: 20px; border-radius: 8px; text-align: center; margin: 25px 0;
        }
        .job-details {
            background: #f9fafb; border-left: 4px solid #6366f1;
            padding: 20px; margin: 25px 0; border-radius: 8px;
        }
        .detail-row {
            display: flex; justify-content: space-between;
            padding: 10px 0; border-bottom: 1px solid #e5e7eb;
        }
        .detail-label { font-weight: 600; color: #6b7280; }
        .detail-value { color: #1f2937; font-weight: 500; }
        .next-steps {
            background: #eff6ff; border: 1px solid #bfdbfe;
            padding: 20px; border-radius: 8px; margin: 25px 0;
        }
        .next-steps h3 { color: #1e40af; margin: 0 0 10px 0; font-size: 16px; }
        .button {
            display: inline-block; color: white; padding: 12px 30px;
            background: linear-gradient(135deg, #6366f1, #10b981);
            border-radius: 8px; text-decoration: none; font-weight: 600;
        }
        .footer {
            text-align: center; margin-top: 30px; padding-top: 20px;
            border-top: 1px solid #e5e7eb; color: #6b7280; font-size: 14px;
        }
    </style>
</head>
<body>
    <div class="email-container">
        <div class="header">
            <div class="logo">$brand_initial</div>
            <h1>Application Confirmed!</h1>
            <div class="success-badge">✓ Successfully Applied</div>
        </div>

        <div class="greeting">Hi $name,</div>

        <div class="message">🎉 You have successfully applied for this job!</div>

        <div class="job-details">
            <h2>📋 Job Details</h2>
            <div class="detail-row">
                <span class="detail-label">Job Name:</span>
                <span class="detail-value">$job_name</span>
            </div>
            <div class="detail-row">
                <span class="detail-label">Salary:</span>
                <span class="detail-value">$salary</span>
            </div>
            <div class="detail-row">
                <span class="detail-label">Duration:</span>
                <span class="detail-value">$duration</span>
            </div>
            <div class="detail-row">
                <span class="detail-label">Applied On:</span>
                <span class="detail-value">$applied_on</span>
            </div>
        </div>

        <div class="next-steps">
            <h3>📌 What's Next?</h3>
            <ul>
$next_steps_html
            </ul>
        </div>

        <div style="text-align: center;">
            <a href="$dashboard_url" class="button">View My Applications</a>
        </div>

        <div class="footer">
            <p>This is an automated email from $brand. Please do not reply to this email.</p>
            <p>© $year $brand. All rights reserved.</p>
        </div>
    </div>
</body>
</html>
""")

APPLICATION_CONFIRMATION_TEXT = Template("""\
Job Application Confirmation

Hi $name,

You have successfully applied for this job!

Job Details:
- Job Name: $job_name
- Salary: $salary
- Duration: $duration
- Applied On: $applied_on

What's Next?
$next_steps_text

View your applications: $dashboard_url

This is an automated email from $brand.
© $year $brand. All rights reserved.
""")

NEXT_STEPS = (
    "The client will review your application",
    "You'll receive a notification if you're shortlisted",
    "Keep your profile updated for better chances",
    "Check your dashboard regularly for updates",
)
