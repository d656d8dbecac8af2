"""smsuri: validation and normalization of sms: URIs for sanitized rich text."""
