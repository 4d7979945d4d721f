"""語系資料與語系專屬處理（泰米爾 / 英文）"""
