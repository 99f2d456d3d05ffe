"""
Upload files - Files of 5MB and more are sent in chunks
"""
import asyncio
from appclient import ApiError, Client, InputFile, setup_logging


async def main():
    setup_logging()
    
    async with Client("https://cloud.example.com/v1") as client:
        client.set_project("my-project").set_key("my-secret-key")
        
        def on_progress(progress):
            print(
                f"{progress.id}: {progress.progress:.1f}% "
                f"({progress.chunks_uploaded}/{progress.chunks_total} chunks)"
            )
        
        try:
            file = await client.storage.create_file(
                "backups",
                "unique()",
                InputFile("disk.img", mime_type="application/octet-stream"),
                read=["role:all"],
                on_progress=on_progress
            )
            print(f"Uploaded: {file.id} ({file.chunks_uploaded} chunks)")
        except ApiError as e:
            print(f"Upload failed [{e.code} {e.type}]: {e.message}")
            print(e.response)


if __name__ == "__main__":
    asyncio.run(main())
